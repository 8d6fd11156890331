"""Sample file download port. Fire and forget."""

from typing import Protocol


class SampleFileProtocol(Protocol):
    """Sample statement download collaborator."""

    def request_sample(self) -> None:
        """Request the sample import file; the response is not consumed."""
        ...
