"""Facade pattern - one call that starts several subsystems."""


class Computer:
    def start(self) -> str:
        return "Computer started"


class Monitor:
    def turn_on(self) -> str:
        return "Monitor turned on"


class ComputerFacade:
    """Owns one of each subsystem and starts them in a fixed order."""

    def __init__(self):
        self.computer = Computer()
        self.monitor = Monitor()

    def start_system(self) -> str:
        # Monitor first, then computer
        monitor_status = self.monitor.turn_on()
        computer_status = self.computer.start()
        return f"{monitor_status} and {computer_status}"
