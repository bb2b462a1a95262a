FICTION_KIND = 'ficcion'
TECHNICAL_KIND = 'tecnico'

FICTION_FORMAT = 'Fiction Book: {title} by {author}'
TECHNICAL_FORMAT = 'Technical Book: {title} by {author}'
RESERVED_NOTE = 'This book is reserved.'

RECEIVED_FORMAT = '{name} received: {message}'
LOAN_MESSAGE_FORMAT = "El libro '{title}' fue prestado."
