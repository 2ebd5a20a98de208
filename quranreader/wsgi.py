"""
WSGI config for quranreader project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'quranreader.settings')

application = get_wsgi_application()
