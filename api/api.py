#!/usr/bin/env python3
"""
Measure Badges API - Web service serving SVG badges for project measures.

Endpoints:
    GET /api/badges/measure - SVG badge for a project's metric
    GET /api/badges/stats   - Badge cache statistics
    GET /health             - Health check

Usage:
    gunicorn api.api:app --bind 0.0.0.0:8000
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

import falcon

# Path resolution - get absolute paths relative to project root
API_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = API_DIR.parent

# Add parent directory to path for badges imports
sys.path.insert(0, str(PROJECT_ROOT))
from badges.config import DEFAULT_PORT, LOG_LEVEL, MEASURES_FILE, SERVICE_NAME, SVG_CONTENT_TYPE  # noqa: E402
from badges.errors import BadgeError  # noqa: E402
from badges.generator import MeasureBadgeGenerator  # noqa: E402
from badges.images import ImageTemplate  # noqa: E402
from badges.measure import MeasureRepository  # noqa: E402
from badges.minimizer import SVGMinimizer  # noqa: E402
from badges.renderer import BadgeRenderer  # noqa: E402

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(levelname)s: %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)


class MeasureBadgeResource:
    """API endpoint serving a badge for one measure of a project."""

    def __init__(self, generator, repository):
        self.generator = generator
        self.repository = repository

    def on_get(self, req, resp):
        """
        Handle GET request to /api/badges/measure

        Query parameters:
        - key: project key (required)
        - metric: metric name (required)
        - template: flat, flat-square or plastic (default flat)
        - blinking: blink the badge when the measure is in error (default false)
        """
        project_key = req.get_param('key', required=True)
        metric = req.get_param('metric', required=True)
        blinking = req.get_param_as_bool('blinking', default=False)

        try:
            template = ImageTemplate.from_name(req.get_param('template', default='flat'))
        except ValueError as e:
            raise falcon.HTTPBadRequest(title='Invalid template', description=str(e))

        measure = self.repository.measure_for(project_key, metric)

        try:
            stream = self.generator.svg_image_stream_for(measure, template, blinking)
        except BadgeError as e:
            logger.error(f"Badge generation failed for {project_key}/{metric}: {e}")
            resp.status = falcon.HTTP_500
            resp.media = {
                'error': 'Failed to generate badge',
                'details': str(e),
                'timestamp': datetime.now().isoformat()
            }
            return

        resp.status = falcon.HTTP_200
        resp.content_type = SVG_CONTENT_TYPE
        resp.cache_control = ['no-cache']
        resp.stream = stream


class BadgeStatsResource:
    """Badge cache statistics endpoint."""

    def __init__(self, generator):
        self.generator = generator

    def on_get(self, req, resp):
        resp.status = falcon.HTTP_200
        resp.media = self.generator.stats()


class HealthResource:
    """Health check endpoint."""

    def __init__(self, repository):
        self.repository = repository

    def on_get(self, req, resp):
        """Handle GET request to /health"""
        resp.status = falcon.HTTP_200
        resp.media = {
            'status': 'ok',
            'service': SERVICE_NAME,
            'projects': self.repository.projects(),
            'timestamp': datetime.now().isoformat()
        }


def create_app(generator=None, repository=None):
    """
    Create the Falcon app.

    Args:
        generator: MeasureBadgeGenerator to use (default: renderer + minimizer)
        repository: MeasureRepository to use (default: loaded from MEASURES_FILE)

    Returns:
        falcon.App with all routes registered
    """
    if generator is None:
        generator = MeasureBadgeGenerator(BadgeRenderer(), SVGMinimizer())
    if repository is None:
        repository = MeasureRepository.from_file(MEASURES_FILE)

    falcon_app = falcon.App()
    falcon_app.add_route('/api/badges/measure', MeasureBadgeResource(generator, repository))
    falcon_app.add_route('/api/badges/stats', BadgeStatsResource(generator))
    falcon_app.add_route('/health', HealthResource(repository))
    return falcon_app


app = create_app()


if __name__ == '__main__':
    # For local testing
    from wsgiref.simple_server import make_server
    port = int(os.getenv('PORT', str(DEFAULT_PORT)))
    with make_server('', port, app) as httpd:
        logger.info(f'Badge server listening on port {port}...')
        httpd.serve_forever()
