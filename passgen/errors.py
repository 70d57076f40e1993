class PasswordGeneratorError(Exception):
    """Base class for everything the generator raises."""


class ExceedsTotalLength(PasswordGeneratorError):
    """The required characters do not fit in the requested length."""

    def __init__(self, required: int, length: int) -> None:
        super().__init__('the number of required elements exceeds requested password length')
        self.required = required
        self.length = length


class NoCharactersSpecified(PasswordGeneratorError):
    """There is no alphabet left to draw characters from."""

    def __init__(self) -> None:
        super().__init__('no characters specified in generator')


class RandomSourceError(PasswordGeneratorError):
    # Raised from the OS error, which stays available as __cause__
    pass
