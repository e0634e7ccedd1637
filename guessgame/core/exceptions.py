class GameException(Exception):
    pass


class InputStreamFailed(GameException):
    pass


class InvalidGuess(GameException):
    def __init__(self, *args, text: str = ""):
        self.text = text
        super(InvalidGuess, self).__init__(*args)


class InvalidConfiguration(Exception):
    pass
