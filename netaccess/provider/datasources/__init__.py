"""Read-only data sources."""

from netaccess.provider.datasources.connectors import CONNECTORS
from netaccess.provider.datasources.groups import GROUPS
from netaccess.provider.datasources.remote_networks import REMOTE_NETWORKS
from netaccess.provider.datasources.resources import RESOURCES
from netaccess.provider.datasources.security_policies import SECURITY_POLICIES
from netaccess.provider.datasources.services import SERVICES
from netaccess.provider.datasources.users import USERS

__all__ = ["CONNECTORS", "GROUPS", "REMOTE_NETWORKS", "RESOURCES", "SECURITY_POLICIES", "SERVICES", "USERS"]
