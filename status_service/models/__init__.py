from status_service.models.status import StatusResponse

__all__ = ["StatusResponse"]
