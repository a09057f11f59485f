class QRCodeError(Exception):
    pass


class InvalidArgumentError(QRCodeError, ValueError):
    pass


class DataTooLongError(QRCodeError, ValueError):
    pass


class InvariantViolationError(QRCodeError, AssertionError):
    pass


class ModuleIndexError(QRCodeError, IndexError):
    pass
