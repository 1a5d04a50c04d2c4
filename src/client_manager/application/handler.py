"""Protocol shared by every use-case handler."""

from typing import Protocol, TypeVar

RequestT = TypeVar("RequestT", contravariant=True)
OutputT = TypeVar("OutputT", covariant=True)


class Handler(Protocol[RequestT, OutputT]):
    """A use case bound to a repository at construction.

    Handlers keep no state between calls; the repository is the only
    thing ``execute`` reads from or writes to.
    """

    def execute(self, request: RequestT) -> OutputT: ...
