"""Run orchestration: route file in, patched components out.

Extraction runs to completion before any file is touched, so a route
file that cannot be resolved aborts the run with nothing written.
"""

import logging

from inject_define_options.config import InjectConfig
from inject_define_options.errors import RouteExtractionError
from inject_define_options.reporting import Reporter
from inject_define_options.ts.routes import extract_routes_from_file
from inject_define_options.vue.patcher import patch_components

logger = logging.getLogger(__name__)


def inject_define_options(config: InjectConfig, reporter: Reporter) -> None:
    """Inject defineOptions({ name }) into every view referenced by the route file.

    Structural problems with the route file are reported through
    `reporter.error` and end the run normally. I/O errors propagate.

    Args:
        config: Route file, views directory and excluded directory names
        reporter: Status channel for skip, success and failure messages
    """
    logger.info("Reading routes from %s", config.route_file)
    try:
        routes = extract_routes_from_file(config.route_file)
    except RouteExtractionError as exc:
        reporter.error(str(exc))
        return

    if not routes:
        reporter.warn("No route with a lazily imported @/views/ component was found")
        return

    logger.info("Matched %d route(s); views dir %s", len(routes), config.views_dir)
    patch_components(routes, config.views_dir, config.exclude_dirs, reporter)
