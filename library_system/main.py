import sys
from library_system.model.BookFactory import create_book
from library_system.model.BookDecorator import ReservedBook
from library_system.notification.Notifier import Notifier
from library_system.notification.User import User
from library_system.utils.Logger import setup_logger

# Setup logger
logger = setup_logger()

def run_demo():
    """
    Run the library demonstration

    Two users subscribe to the notifier, two books are created through the
    factory, one of them is reserved and then loaned.

    Returns
    -------
    None
    """
    # Create users (observers)
    ana = User("Ana")
    luis = User("Luis")

    # Create notifier and subscribe the users
    notifier = Notifier()
    notifier.subscribe(ana)
    notifier.subscribe(luis)

    # Create books through the factory
    fiction = create_book("ficcion", "Harry Potter", "J.K. Rowling")
    technical = create_book("tecnico", "Design Patterns", "Gamma")

    fiction.show_info()
    technical.show_info()

    # Reserve a book
    reserved = ReservedBook(fiction)
    reserved.show_info()

    # Notify the loan
    notifier.notify_loan(fiction)
    logger.info('Library demo finished')

def main():
    run_demo()
    return 0

if __name__ == '__main__':
    sys.exit(main())
