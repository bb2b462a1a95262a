from library_system.constants import LOAN_MESSAGE_FORMAT
from library_system.utils.Logger import setup_logger
from library_system.utils.ObserverPattern import Subject

@Subject
class Notifier():
    """
    Notifier class to broadcast library events to the users

    The notifier does not own its subscribers, it only keeps references to
    them for delivery.

    Attributes
    ----------
    logger: logger object
        The object to log information
    subscribers: tuple of User
        The current subscribers in subscription order

    Methods
    -------
    subscribe(subscriber)
        Append a subscriber, duplicates are kept
    unsubscribe(subscriber)
        Remove the first subscription of a subscriber
    broadcast(message)
        Deliver the message to every subscriber in subscription order
    notify_loan(book)
        Broadcast that the book was loaned
    """
    def __init__(self):
        self.logger = setup_logger()

    def notify_loan(self, book):
        message = LOAN_MESSAGE_FORMAT.format(title=book.title)
        self.logger.info(f"Broadcasting loan of '{book.title}' to {len(self.subscribers)} subscribers")
        self.broadcast(message)
        return message
