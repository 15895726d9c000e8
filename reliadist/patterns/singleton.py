class Singleton(type):
    """
    Metaclass for singleton pattern.

    The first call to the class creates the instance; subsequent calls return it,
    whatever the arguments. Each derived class holds its own instance.

    Examples
    --------

    >>> class StandardLaw(metaclass=Singleton):
    >>>     pass
    >>> 
    >>> a = StandardLaw()
    >>> b = StandardLaw()
    >>> assert a is b
    """
    def __init__(cls, name, bases, attrs):
        super().__init__(name, bases, attrs)
        cls.__instance = None

    def __call__(cls, *args, **kwargs):
        if cls.__instance is None:
            cls.__instance = super().__call__(*args, **kwargs)
        return cls.__instance
