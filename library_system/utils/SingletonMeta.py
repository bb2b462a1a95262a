
class SingletonMeta(type):
    """
    A metaclass that gives every class using it a single shared instance.

    The first call to the class builds the instance and caches it, every
    later call returns the cached one and ignores its arguments.

    Attributes:
    -----------
    _instances : dict
        The single instance of each class using this metaclass, keyed by class.
    """

    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            instance = super().__call__(*args, **kwargs)
            cls._instances[cls] = instance
        return cls._instances[cls]
