import logging

from bs4 import BeautifulSoup

from timedtext.config import EBUTTM_NAMESPACE, SUPPORTED_VERSION
from timedtext.errors import FormatError, UnsupportedVersionError

logger = logging.getLogger(__name__)


def _in_namespace(node, namespace):
    prefix, uris = namespace
    return getattr(node, 'namespace', None) in uris or getattr(node, 'prefix', None) == prefix


def qualified(namespace, name):
    """Tag filter for find_all/find matching a qualified name such as tt:p.

    namespace is a (prefix, uris) pair from timedtext.config. A tag matches
    when its local name is name and either its namespace URI is one of uris
    or it is written with the conventional prefix.
    """
    def match(tag):
        return tag.name == name and _in_namespace(tag, namespace)
    return match


def get_ns_attribute(tag, namespace, name, default=None):
    """Return the value of a namespace qualified attribute such as xml:id."""
    for key, value in tag.attrs.items():
        if getattr(key, 'name', None) == name and _in_namespace(key, namespace):
            return value
    return default


def load_document(data):
    """Parse raw TTML bytes and check the EBU-TT version metadata.

    Raises FormatError when the version element is missing and
    UnsupportedVersionError when it names anything but v1.0.
    """
    document = BeautifulSoup(data, 'xml')

    version = document.find(qualified(EBUTTM_NAMESPACE, 'documentEbuttVersion'))
    if version is None:
        raise FormatError("Unknown File Format")

    version_text = version.get_text().strip()
    if version_text.lower() != SUPPORTED_VERSION.lower():
        raise UnsupportedVersionError(f"Unknown TTML file version: {version_text}")

    logger.debug(f"Loaded EBU-TT document version {version_text}")
    return document
