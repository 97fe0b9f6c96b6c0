"""Route table based URL generator."""

from typing import Any, Dict, Optional
from urllib.parse import quote

from ..domain.collaborators import UrlGenerator
from ..domain.result import InvalidPathError

DEFAULT_ROUTES: Dict[str, str] = {
    "files.viewcontroller.showFile": "/index.php/f/{fileid}",
}


class RouteUrlGenerator(UrlGenerator):
    """Expands route templates against a base URL."""

    def __init__(self, base_url: str = "http://localhost", routes: Optional[Dict[str, str]] = None):
        self.base_url = base_url.rstrip('/')
        self._routes = dict(DEFAULT_ROUTES)
        if routes:
            self._routes.update(routes)

    def link_to_route_absolute(self, route_name: str, parameters: Optional[Dict[str, Any]] = None) -> str:
        """Build an absolute link.

        Raises:
            InvalidPathError: If the route is unknown or a route parameter is
                missing or empty
        """
        template = self._routes.get(route_name)
        if template is None:
            raise InvalidPathError(f"Unknown route {route_name}")
        parameters = parameters or {}
        values = {}
        for key, value in parameters.items():
            if value is None or str(value) == '':
                raise InvalidPathError(f"Empty value for route parameter {key}")
            values[key] = quote(str(value), safe='')
        try:
            path = template.format(**values)
        except KeyError as e:
            raise InvalidPathError(f"Missing route parameter {e.args[0]} for {route_name}") from e
        return f"{self.base_url}{path}"

    def image_path(self, app: str, image: str) -> str:
        return f"{self.base_url}/{app}/img/{image}"
