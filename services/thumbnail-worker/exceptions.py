"""Custom exceptions for the thumbnail-worker service."""


class PipelineError(Exception):
    """Base class for fatal preview pipeline failures."""

    stage = "unknown"

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class AssetNotFoundError(PipelineError):
    """Raised when no asset record matches the requested identifier."""

    stage = "load"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__(f"Asset '{asset_id}' not found")


class StagingError(PipelineError):
    """Raised when copying an object to a local temp file fails."""

    stage = "stage"

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to stage '{object_name}' to a temp file", cause)


class ProbeProcessError(PipelineError):
    """Raised when the probing tool cannot be run or exits abnormally."""

    stage = "probe"

    def __init__(
        self,
        video_path: str,
        returncode: int | None = None,
        cause: Exception | None = None,
    ):
        self.video_path = video_path
        self.returncode = returncode
        detail = f" (rc={returncode})" if returncode is not None else ""
        super().__init__(f"Failed to probe '{video_path}'{detail}", cause)


class ProbeParseError(PipelineError):
    """Raised when probe output is not a 'rate/count' line."""

    stage = "probe"

    def __init__(self, output: str, reason: str = "unexpected format"):
        self.output = output
        self.reason = reason
        super().__init__(f"Unparseable probe output {output!r}: {reason}")


class ExtractionError(PipelineError):
    """Raised when the frame-processing tool fails to produce an artifact."""

    stage = "extract"

    def __init__(
        self,
        video_path: str,
        codec: str,
        reason: str = "tool failed",
        cause: Exception | None = None,
    ):
        self.video_path = video_path
        self.codec = codec
        self.reason = reason
        super().__init__(
            f"Failed to extract {codec} from '{video_path}': {reason}", cause
        )


class PersistenceError(PipelineError):
    """Raised when recording or uploading preview artifacts fails."""

    stage = "persist"

    def __init__(self, asset_id: int, cause: Exception | None = None):
        self.asset_id = asset_id
        super().__init__(f"Failed to persist previews for asset '{asset_id}'", cause)


class ToolInvocationError(Exception):
    """Raised when an external tool cannot be started or times out."""

    def __init__(self, tool: str, cause: Exception | None = None):
        self.tool = tool
        self.cause = cause
        super().__init__(f"Failed to run '{tool}'")
