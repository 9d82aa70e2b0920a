class StorageError(Exception):
    """A store could not complete an operation."""


class NotFound(StorageError):
    """The referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
