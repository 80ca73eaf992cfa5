"""Managed resources."""

from netaccess.provider.resources.connector import CONNECTOR
from netaccess.provider.resources.group import GROUP
from netaccess.provider.resources.remote_network import REMOTE_NETWORK
from netaccess.provider.resources.resource import RESOURCE
from netaccess.provider.resources.service_key import SERVICE_KEY
from netaccess.provider.resources.user import USER

__all__ = ["CONNECTOR", "GROUP", "REMOTE_NETWORK", "RESOURCE", "SERVICE_KEY", "USER"]
