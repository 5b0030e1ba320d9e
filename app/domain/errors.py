# app/domain/errors.py


class ServiceError(Exception):
    """Bazowy wyjatek warstwy serwisow."""


class NotFoundError(ServiceError):
    """Koszyk, produkt, zamowienie, uzytkownik lub vendor nie istnieje."""


class ValidationError(ServiceError):
    """Niepoprawne dane wejsciowe, odrzucone przed zapisem do bazy."""


class ConflictError(ServiceError):
    """Operacja niedozwolona w obecnym stanie (pusty koszyk, konflikt wersji, zly status)."""


class StorageError(ServiceError):
    """Blad bazy w trakcie transakcji, wszystko zostalo wycofane."""
