"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Caller-supplied input violates a core rule."""

    pass


class DuplicateVoterError(DomainError):
    """Raised when a voter already has a recorded decision for a subject."""

    def __init__(
        self,
        subject_type: str,
        subject_id: int,
        voter_id: str,
        existing_vote_id: object | None = None,
    ):
        self.subject_type = subject_type
        self.subject_id = subject_id
        self.voter_id = voter_id
        self.existing_vote_id = existing_vote_id
        super().__init__(
            f"Voter {voter_id} has already voted on {subject_type} {subject_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DataIntegrityError(DomainError):
    """Raised when persisted data holds a value the domain does not recognize."""

    def __init__(self, table: str, column: str, value: object):
        self.table = table
        self.column = column
        self.value = value
        super().__init__(f"Unrecognized value {value!r} in {table}.{column}")
