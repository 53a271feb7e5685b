# XML namespaces used by EBU-TT documents: (conventional prefix, accepted URIs)
TT_NAMESPACE = ("tt", ("http://www.w3.org/ns/ttml",))
TTS_NAMESPACE = ("tts", ("http://www.w3.org/ns/ttml#styling",))
XML_NAMESPACE = ("xml", ("http://www.w3.org/XML/1998/namespace",))
# EBU-TT v1.0 (Tech 3350) binds ebuttm to urn:ebu:metadata, later revisions to urn:ebu:tt:metadata
EBUTTM_NAMESPACE = ("ebuttm", ("urn:ebu:metadata", "urn:ebu:tt:metadata"))

# Only EBU-TT v1.0 files have been tested
SUPPORTED_VERSION = "v1.0"

# Source timestamps carry a fixed 10 hour offset
HOUR_BIAS = 10
HOUR_BIAS_THRESHOLD = 10

SRT_ENCODING = "utf-8"

# Codes passed to the reporter
PARSE_FAILED = 912036478
WRITE_FAILED = 201036470

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
