from fastapi import Request

from medibloc.controllers.resources import Controllers


def get_controllers(request: Request) -> Controllers:
    return request.app.state.controllers
