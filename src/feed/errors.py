"""Error hierarchy for the weekly feed pipeline.

Every failure the pipeline can hit is a FeedError subclass, so the HTTP layer
maps errors to status codes by type:

    InvalidTokenError      -> 400
    UpstreamEmptyError     -> 200 with an empty body
    UpstreamFailureError   -> 500
    ProjectionError        -> 500

The first error raised aborts the whole request; nothing is retried.
"""


class FeedError(Exception):
    """Base exception for all feed errors."""

    pass


class InvalidTokenError(FeedError):
    """Autologin token missing from the path or not of the expected shape."""

    def __init__(self, reason: str = "invalid autologin provided") -> None:
        super().__init__(reason)
        self.reason = reason


class UpstreamError(FeedError):
    """Base for failures reported by the intranet planning endpoint."""

    pass


class UpstreamEmptyError(UpstreamError):
    """The intranet reported no schedule data at all.

    Distinct from an empty list of activities, which still yields a valid
    header-only calendar.
    """

    def __init__(self, message: str = "no planning data returned") -> None:
        super().__init__(message)


class UpstreamFailureError(UpstreamError):
    """Transport failure, bad status or unreadable payload from the intranet.

    The message is passed through to the client verbatim, so it must never
    contain the autologin token.
    """

    pass


class ProjectionError(FeedError):
    """A registered activity could not be turned into a calendar event.

    Subclasses name the record field that was missing or ambiguous.
    """

    field: str = ""
    message: str = "could not project an event"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class AmbiguousRegistrationError(ProjectionError):
    field = "event_registered"
    message = "could not get registration status of an event"


class MissingTitleError(ProjectionError):
    field = "acti_title"
    message = "could not get title of an event"


class MissingStartError(ProjectionError):
    field = "start"
    message = "could not get start time of an event"


class MissingEndError(ProjectionError):
    field = "end"
    message = "could not get end time of an event"


class MissingReferenceError(ProjectionError):
    field = "scolaryear/codemodule/codeinstance/codeacti"
    message = "could not construct url of an event"
