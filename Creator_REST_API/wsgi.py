"""
WSGI config for Creator_REST_API project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'Creator_REST_API.settings')

application = get_wsgi_application()
