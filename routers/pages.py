import os

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse, Response

from config import Settings, get_settings

# Clean URL -> HTML file under PUBLIC_DIR
PAGES = {
    "/": "index.html",
    "/register": "register.html",
    "/schedule": "schedule.html",
    "/team": "team.html",
    "/events": "event.html",
    "/contact": "contact.html",
    "/admin": "admin.html",
    "/auth": "auth.html",
    "/dashboard": "dashboard.html",
    "/sponsors": "sponsors.html",
    "/merch": "merch.html",
    "/gallery": "gallery.html",
}

NOT_FOUND_PAGE = "404.html"

router = APIRouter(include_in_schema=False)


def not_found_page(public_dir: str) -> Response:
    """The site's 404 page, always with status 404."""
    path = os.path.join(public_dir, NOT_FOUND_PAGE)
    if os.path.isfile(path):
        return FileResponse(path, status_code=404)
    return HTMLResponse("<h1>404 Not Found</h1>", status_code=404)


def page_endpoint(filename: str):
    def serve_page(settings: Settings = Depends(get_settings)) -> Response:
        path = os.path.join(settings.public_dir, filename)
        if not os.path.isfile(path):
            return not_found_page(settings.public_dir)
        return FileResponse(path)

    serve_page.__name__ = f"page_{os.path.splitext(filename)[0]}"
    return serve_page


for route, filename in PAGES.items():
    router.add_api_route(route, page_endpoint(filename), methods=["GET"])
