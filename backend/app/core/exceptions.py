"""
Exceptions raised inside services. Not-found is deliberately absent: a missing
record is returned as None by the store and as Result.not_found() by services.
"""


class ValidationError(ValueError):
    """Invalid caller input: blank identifiers, missing rubric, mismatched ids."""


class DocumentExistsError(ValidationError):
    """A create was attempted on a document id that is already taken."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"Document '{doc_id}' already exists in '{collection}'")
        self.collection = collection
        self.doc_id = doc_id


class UpstreamError(Exception):
    """
    The document store or the model service could not complete a call.

    The message is short and safe to show to API clients; the original
    exception is chained as __cause__ for the logs.
    """
