import unittest
from library_system.utils.ObserverPattern import Subject, Observer
from library_system.utils.SingletonMeta import SingletonMeta

class TestObserverPattern(unittest.TestCase):

    def test_subject_keeps_class_identity(self):
        @Subject
        class Board():
            """A board"""
            def __init__(self, name):
                self.name = name

        board = Board("news")
        self.assertEqual(Board.__name__, "Board")
        self.assertEqual(Board.__doc__, "A board")
        self.assertEqual(board.name, "news")
        self.assertEqual(board.subscribers, ())

    def test_observer_requires_receive(self):
        with self.assertRaises(TypeError):
            @Observer
            class Deaf():
                pass

    def test_observer_returns_class_unchanged(self):
        class Listener():
            def receive(self, message):
                pass

        before = dict(vars(Listener))
        self.assertIs(Observer(Listener), Listener)
        self.assertEqual(dict(vars(Listener)), before)

    def test_observer_receives_broadcast(self):
        @Observer
        class Listener():
            def __init__(self):
                self.messages = []
            def receive(self, message):
                self.messages.append(message)

        @Subject
        class Board():
            pass

        board = Board()
        listener = Listener()
        board.subscribe(listener)
        board.broadcast("one")
        board.broadcast("two")
        self.assertEqual(listener.messages, ["one", "two"])

class TestSingletonMeta(unittest.TestCase):

    def test_single_instance(self):
        class Registry(metaclass=SingletonMeta):
            def __init__(self, value=None):
                self.value = value

        first = Registry(1)
        second = Registry(2)
        self.assertIs(first, second)
        self.assertEqual(second.value, 1)
        SingletonMeta._instances.pop(Registry)
        self.assertEqual(Registry(3).value, 3)

if __name__ == '__main__':
    unittest.main()
