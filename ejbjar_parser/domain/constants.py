"""Shared constants for descriptor parsing and DTD resolution.

Centralizes the element names of the ejb-jar descriptor format, the class
roles that contribute to the manifest, and the public identifiers of the
DTDs bundled with the package.
"""

# ── Descriptor Element Names ────────────────────────────────────────────

EJB_JAR = 'ejb-jar'
ENTERPRISE_BEANS = 'enterprise-beans'
SESSION_BEAN = 'session'
ENTITY_BEAN = 'entity'
MESSAGE_BEAN = 'message-driven'

EJB_REF = 'ejb-ref'
EJB_NAME = 'ejb-name'

HOME_INTERFACE = 'home'
REMOTE_INTERFACE = 'remote'
LOCAL_INTERFACE = 'local'
LOCAL_HOME_INTERFACE = 'local-home'
BEAN_CLASS = 'ejb-class'
PK_CLASS = 'prim-key-class'

# Leaf elements whose text is a fully-qualified class name to bundle
CLASS_ROLE_TAGS: frozenset[str] = frozenset({
    HOME_INTERFACE,
    REMOTE_INTERFACE,
    LOCAL_INTERFACE,
    LOCAL_HOME_INTERFACE,
    BEAN_CLASS,
    PK_CLASS,
})

# ── Manifest Conventions ────────────────────────────────────────────────

# Platform classes are provided by the container, never bundled
RESERVED_PREFIXES: tuple[str, ...] = ('java.', 'javax.')

CLASS_EXTENSION = '.class'
NAMESPACE_SEPARATOR = '.'

# ── Known DTDs ──────────────────────────────────────────────────────────

PUBLICID_EJB11 = '-//Sun Microsystems, Inc.//DTD Enterprise JavaBeans 1.1//EN'
PUBLICID_EJB20 = '-//Sun Microsystems, Inc.//DTD Enterprise JavaBeans 2.0//EN'

# Public id → bundled resource name (relative to the package root)
KNOWN_DTD_RESOURCES: dict[str, str] = {
    PUBLICID_EJB11: 'resources/ejb-jar_1_1.dtd',
    PUBLICID_EJB20: 'resources/ejb-jar_2_0.dtd',
}

REMOTE_URL_SCHEMES: frozenset[str] = frozenset({'http', 'https'})

DEFAULT_FETCH_TIMEOUT = 30
