"""
Exceções de domínio da aplicação

Cada exceção carrega o status HTTP com que é exposta ao cliente.
"""


class NeokidsError(Exception):
    """Erro base das operações de negócio"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(NeokidsError):
    status_code = 404


class UnauthorizedError(NeokidsError):
    status_code = 401


class InvalidInputError(NeokidsError):
    status_code = 400


class InvalidTransitionError(NeokidsError):
    """Transição fora da cadeia de status do atendimento"""

    status_code = 409


class ConflictError(NeokidsError):
    """Revisão desatualizada ou remoção bloqueada por atendimentos ativos"""

    status_code = 409


class StorageFailureError(NeokidsError):
    status_code = 500
