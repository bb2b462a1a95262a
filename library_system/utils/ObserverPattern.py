# This file contains the implementation of the Observer Pattern

def Subject(cls):
    """
    The decorator to add the Subject functionality to a class

    The wrapped class keeps its subscribers in subscription order and
    delivers every broadcast to each of them through ``receive``. The same
    subscriber may be added more than once and is then called once per
    subscription.
    """
    class Wrapped(cls):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._subscribers = []

        @property
        def subscribers(self):
            return tuple(self._subscribers)

        def subscribe(self, subscriber):
            if not callable(getattr(subscriber, 'receive', None)):
                raise TypeError(f"{subscriber!r} has no 'receive' method")
            self._subscribers.append(subscriber)

        def unsubscribe(self, subscriber):
            # Only the first subscription is removed
            self._subscribers.remove(subscriber)

        def broadcast(self, message):
            # A failing subscriber stops the remaining deliveries
            for subscriber in list(self._subscribers):
                subscriber.receive(message)

    Wrapped.__name__ = cls.__name__
    Wrapped.__qualname__ = cls.__qualname__
    Wrapped.__module__ = cls.__module__
    Wrapped.__doc__ = cls.__doc__
    return Wrapped

def Observer(cls):
    """
    The decorator to add the Observer functionality to a class

    The class must define ``receive(message)``.
    """
    if not callable(getattr(cls, 'receive', None)):
        raise TypeError(f"Observer {cls.__name__} must implement 'receive'")
    return cls
