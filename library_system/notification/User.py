from library_system.constants import RECEIVED_FORMAT
from library_system.utils.ObserverPattern import Observer

@Observer
class User():
    """
    A library user who gets notified about library events
    """
    def __init__(self, name):
        self.name = name

    def receive(self, message):
        print(RECEIVED_FORMAT.format(name=self.name, message=message))

    def __repr__(self):
        return f"User(name={self.name!r})"
