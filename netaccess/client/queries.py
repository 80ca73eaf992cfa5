"""GraphQL documents sent to the API."""

# ------------------------------------------------------------------
# Fragments
# ------------------------------------------------------------------

CONNECTOR_FIELDS = """
fragment ConnectorFields on Connector {
  id
  name
  hasStatusNotificationsEnabled
  remoteNetwork { id }
}
"""

REMOTE_NETWORK_FIELDS = """
fragment RemoteNetworkFields on RemoteNetwork {
  id
  name
  location
}
"""

RESOURCE_FIELDS = """
fragment ResourceFields on Resource {
  id
  name
  address { value }
  remoteNetwork { id }
  groups { edges { node { id } } }
  protocols {
    allowIcmp
    tcp { policy ports { start end } }
    udp { policy ports { start end } }
  }
}
"""

GROUP_FIELDS = """
fragment GroupFields on Group {
  id
  name
  type
  isActive
}
"""

USER_FIELDS = """
fragment UserFields on User {
  id
  email
  firstName
  lastName
  role
  type
  state
}
"""

SERVICE_KEY_FIELDS = """
fragment ServiceKeyFields on ServiceAccountKey {
  id
  name
  status
  serviceAccount { id }
}
"""

# ------------------------------------------------------------------
# Connectors
# ------------------------------------------------------------------

CREATE_CONNECTOR = """
mutation CreateConnector($remoteNetworkId: ID!) {
  connectorCreate(remoteNetworkId: $remoteNetworkId) {
    ok
    error
    entity { ...ConnectorFields }
  }
}
""" + CONNECTOR_FIELDS

READ_CONNECTOR = """
query ReadConnector($id: ID!) {
  connector(id: $id) { ...ConnectorFields }
}
""" + CONNECTOR_FIELDS

READ_CONNECTORS = """
query ReadConnectors {
  connectors { edges { node { ...ConnectorFields } } }
}
""" + CONNECTOR_FIELDS

UPDATE_CONNECTOR = """
mutation UpdateConnector($id: ID!, $name: String!) {
  connectorUpdate(id: $id, name: $name) {
    ok
    error
    entity { ...ConnectorFields }
  }
}
""" + CONNECTOR_FIELDS

DELETE_CONNECTOR = """
mutation DeleteConnector($id: ID!) {
  connectorDelete(id: $id) { ok error }
}
"""

# ------------------------------------------------------------------
# Remote networks
# ------------------------------------------------------------------

CREATE_REMOTE_NETWORK = """
mutation CreateRemoteNetwork($name: String!, $location: RemoteNetworkLocation!) {
  remoteNetworkCreate(name: $name, location: $location) {
    ok
    error
    entity { ...RemoteNetworkFields }
  }
}
""" + REMOTE_NETWORK_FIELDS

READ_REMOTE_NETWORK = """
query ReadRemoteNetwork($id: ID!) {
  remoteNetwork(id: $id) { ...RemoteNetworkFields }
}
""" + REMOTE_NETWORK_FIELDS

READ_REMOTE_NETWORK_BY_NAME = """
query ReadRemoteNetworkByName($name: String!) {
  remoteNetworks(filter: {name: {eq: $name}}) { edges { node { ...RemoteNetworkFields } } }
}
""" + REMOTE_NETWORK_FIELDS

READ_REMOTE_NETWORKS = """
query ReadRemoteNetworks {
  remoteNetworks { edges { node { ...RemoteNetworkFields } } }
}
""" + REMOTE_NETWORK_FIELDS

UPDATE_REMOTE_NETWORK = """
mutation UpdateRemoteNetwork($id: ID!, $name: String!, $location: RemoteNetworkLocation!) {
  remoteNetworkUpdate(id: $id, name: $name, location: $location) {
    ok
    error
    entity { ...RemoteNetworkFields }
  }
}
""" + REMOTE_NETWORK_FIELDS

DELETE_REMOTE_NETWORK = """
mutation DeleteRemoteNetwork($id: ID!) {
  remoteNetworkDelete(id: $id) { ok error }
}
"""

# ------------------------------------------------------------------
# Resources
# ------------------------------------------------------------------

CREATE_RESOURCE = """
mutation CreateResource(
  $name: String!, $address: String!, $remoteNetworkId: ID!, $groupIds: [ID], $protocols: ProtocolsInput
) {
  resourceCreate(
    name: $name, address: $address, remoteNetworkId: $remoteNetworkId, groupIds: $groupIds, protocols: $protocols
  ) {
    ok
    error
    entity { ...ResourceFields }
  }
}
""" + RESOURCE_FIELDS

READ_RESOURCE = """
query ReadResource($id: ID!) {
  resource(id: $id) { ...ResourceFields }
}
""" + RESOURCE_FIELDS

READ_RESOURCES_BY_NAME = """
query ReadResourcesByName($name: String!) {
  resources(filter: {name: {eq: $name}}) { edges { node { ...ResourceFields } } }
}
""" + RESOURCE_FIELDS

READ_RESOURCES = """
query ReadResources {
  resources { edges { node { ...ResourceFields } } }
}
""" + RESOURCE_FIELDS

UPDATE_RESOURCE = """
mutation UpdateResource(
  $id: ID!, $name: String!, $address: String!, $remoteNetworkId: ID!, $groupIds: [ID], $protocols: ProtocolsInput
) {
  resourceUpdate(
    id: $id, name: $name, address: $address, remoteNetworkId: $remoteNetworkId, groupIds: $groupIds,
    protocols: $protocols
  ) {
    ok
    error
    entity { ...ResourceFields }
  }
}
""" + RESOURCE_FIELDS

DELETE_RESOURCE = """
mutation DeleteResource($id: ID!) {
  resourceDelete(id: $id) { ok error }
}
"""

# ------------------------------------------------------------------
# Groups
# ------------------------------------------------------------------

CREATE_GROUP = """
mutation CreateGroup($name: String!) {
  groupCreate(name: $name) {
    ok
    error
    entity { ...GroupFields }
  }
}
""" + GROUP_FIELDS

READ_GROUP = """
query ReadGroup($id: ID!) {
  group(id: $id) { ...GroupFields }
}
""" + GROUP_FIELDS

READ_GROUPS = """
query ReadGroups {
  groups { edges { node { ...GroupFields } } }
}
""" + GROUP_FIELDS

UPDATE_GROUP = """
mutation UpdateGroup($id: ID!, $name: String!) {
  groupUpdate(id: $id, name: $name) {
    ok
    error
    entity { ...GroupFields }
  }
}
""" + GROUP_FIELDS

DELETE_GROUP = """
mutation DeleteGroup($id: ID!) {
  groupDelete(id: $id) { ok error }
}
"""

# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------

CREATE_USER = """
mutation CreateUser(
  $email: String!, $firstName: String, $lastName: String, $role: UserRole, $shouldSendInvite: Boolean
) {
  userCreate(
    email: $email, firstName: $firstName, lastName: $lastName, role: $role, shouldSendInvite: $shouldSendInvite
  ) {
    ok
    error
    entity { ...UserFields }
  }
}
""" + USER_FIELDS

READ_USER = """
query ReadUser($id: ID!) {
  user(id: $id) { ...UserFields }
}
""" + USER_FIELDS

READ_USERS = """
query ReadUsers {
  users { edges { node { ...UserFields } } }
}
""" + USER_FIELDS

UPDATE_USER = """
mutation UpdateUser($id: ID!, $firstName: String, $lastName: String, $role: UserRole, $state: UserStateUpdateInput) {
  userUpdate(id: $id, firstName: $firstName, lastName: $lastName, role: $role, state: $state) {
    ok
    error
    entity { ...UserFields }
  }
}
""" + USER_FIELDS

DELETE_USER = """
mutation DeleteUser($id: ID!) {
  userDelete(id: $id) { ok error }
}
"""

# ------------------------------------------------------------------
# Service keys
# ------------------------------------------------------------------

CREATE_SERVICE_KEY = """
mutation CreateServiceKey($serviceAccountId: ID!, $name: String, $expirationTime: Int!) {
  serviceAccountKeyCreate(serviceAccountId: $serviceAccountId, name: $name, expirationTime: $expirationTime) {
    ok
    error
    entity { ...ServiceKeyFields }
    token
  }
}
""" + SERVICE_KEY_FIELDS

READ_SERVICE_KEY = """
query ReadServiceKey($id: ID!) {
  serviceAccountKey(id: $id) { ...ServiceKeyFields }
}
""" + SERVICE_KEY_FIELDS

READ_SERVICE_KEYS = """
query ReadServiceKeys {
  serviceAccountKeys { edges { node { ...ServiceKeyFields } } }
}
""" + SERVICE_KEY_FIELDS

UPDATE_SERVICE_KEY = """
mutation UpdateServiceKey($id: ID!, $name: String!) {
  serviceAccountKeyUpdate(id: $id, name: $name) {
    ok
    error
    entity { ...ServiceKeyFields }
  }
}
""" + SERVICE_KEY_FIELDS

REVOKE_SERVICE_KEY = """
mutation RevokeServiceKey($id: ID!) {
  serviceAccountKeyRevoke(id: $id) { ok error }
}
"""

DELETE_SERVICE_KEY = """
mutation DeleteServiceKey($id: ID!) {
  serviceAccountKeyDelete(id: $id) { ok error }
}
"""

# ------------------------------------------------------------------
# Service accounts
# ------------------------------------------------------------------

SERVICE_ACCOUNT_FIELDS = """
fragment ServiceAccountFields on ServiceAccount {
  id
  name
  resources { edges { node { id } } }
  keys { edges { node { id } } }
}
"""

READ_SERVICE_ACCOUNTS = """
query ReadServiceAccounts {
  serviceAccounts { edges { node { ...ServiceAccountFields } } }
}
""" + SERVICE_ACCOUNT_FIELDS

READ_SERVICE_ACCOUNTS_BY_NAME = """
query ReadServiceAccountsByName($name: String!) {
  serviceAccounts(filter: {name: {eq: $name}}) { edges { node { ...ServiceAccountFields } } }
}
""" + SERVICE_ACCOUNT_FIELDS

# ------------------------------------------------------------------
# Security policies
# ------------------------------------------------------------------

READ_SECURITY_POLICIES = """
query ReadSecurityPolicies {
  securityPolicies { edges { node { id name } } }
}
"""
