"""Usage demonstrations for the behavioral patterns."""
from pattern_catalogue.application.console import DemoConsole
from pattern_catalogue.application.decorators import demo
from pattern_catalogue.domain.behavioral import (
    TV,
    Collection,
    Light,
    LightOffCommand,
    LightOnCommand,
    Observer,
    RemoteControl,
    Subject,
    TVOffCommand,
    TVOnCommand,
    build_default_chain,
)
from pattern_catalogue.infrastructure.di import DIContainer


@demo("observer", category="behavioral", description="One-to-many notification")
def observer_demo(console: DemoConsole, container: DIContainer) -> None:
    subject = Subject()
    for name in ("Observer 1", "Observer 2", "Observer 3"):
        subject.add_observer(Observer(name, emit=console.emit))

    subject.notify_observers("Hello Observers!")


@demo("chain", category="behavioral", description="Sequential delegation until handled")
def chain_demo(console: DemoConsole, container: DIContainer) -> None:
    chain = build_default_chain()
    for request in ("low", "medium", "high", "unknown"):
        console.emit(chain.handle(request))


@demo("iterator", category="behavioral", description="Sequential traversal abstraction")
def iterator_demo(console: DemoConsole, container: DIContainer) -> None:
    collection = Collection()
    collection.add("Item 1")
    collection.add("Item 2")
    collection.add("Item 3")

    iterator = collection.get_iterator()
    while iterator.has_next():
        console.emit(iterator.next())


@demo("command", category="behavioral", description="Encapsulated invocation with a decoupled invoker")
def command_demo(console: DemoConsole, container: DIContainer) -> None:
    light = Light(emit=console.emit)
    tv = TV(emit=console.emit)

    remote = RemoteControl()
    for command in (
        LightOnCommand(light),
        LightOffCommand(light),
        TVOnCommand(tv),
        TVOffCommand(tv),
    ):
        remote.set_command(command)
        remote.press_button()
