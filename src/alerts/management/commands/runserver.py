"""
Django management command to run the development server on PORT.
"""

from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import (
    Command as StaticfilesRunserverCommand,
)


class Command(StaticfilesRunserverCommand):
    """runserver that listens on settings.PORT when no address is given."""

    default_port = settings.PORT
