"""
Request dispatcher for pages and static assets.

A single catch-all GET route resolves the path through the
``RouteTable`` and hands the resulting file to the ``FileService``.
Unknown paths get the 404 page.  Other methods never get here: the
application middleware answers them with the 405 page.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from laundry_site.app.services.file_service import FileService
from laundry_site.app.services.route_table import RouteTable

router = APIRouter()


def get_route_table(request: Request) -> RouteTable:
    return request.app.state.route_table


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service


@router.get("/{requested_path:path}", include_in_schema=False)
async def dispatch(
    request: Request,
    routes: RouteTable = Depends(get_route_table),
    files: FileService = Depends(get_file_service),
) -> Response:
    """Serve the page or asset behind the request path.

    The query string plays no part in matching: ``/about?ref=home``
    serves the same page as ``/about``.
    """
    file_path = routes.resolve(request.url.path)
    if file_path is None:
        return await files.serve_not_found()
    return await files.serve_file(file_path, status.HTTP_200_OK)
