"""Design pattern tests package.

This package contains tests for each pattern module: Singleton, Factory
Method, Adapter, Decorator, Composite, Facade, Observer, Chain of
Responsibility, Iterator and Command.
"""
