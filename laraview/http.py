"""
Sanic Integration
Render views from async Sanic handlers without blocking the event loop
"""
import asyncio
from typing import Any, Dict, Optional, TYPE_CHECKING

from sanic.response import HTTPResponse, html

if TYPE_CHECKING:
    from laraview.blade import ViewService


async def render_async(
    service: 'ViewService',
    view: str,
    data: Optional[Dict[str, Any]] = None,
    merge_data: Optional[Dict[str, Any]] = None
) -> str:
    """
    Render a view in a worker thread

    Compiling and evaluating touch the disk, so the work runs in the
    default executor. Errors propagate unchanged.
    """
    def _render():
        return service.render(view, data, merge_data).render()

    return await asyncio.to_thread(_render)


async def view_response(
    service: 'ViewService',
    view: str,
    data: Optional[Dict[str, Any]] = None,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> HTTPResponse:
    """
    Render a view into an HTML response

    Example:
        @app.get('/')
        async def index(request):
            return await view_response(blade, 'index', {'user': user})
    """
    content = await render_async(service, view, data)
    return html(content, status=status, headers=headers)
