from status_service.api.status import status_route

routes = [status_route]
