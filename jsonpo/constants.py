"""String constants used across jsonpo modules."""

from typing import Literal


class ConvertMode:
    """JSON flavour identifiers selectable on the command line."""

    RAINBEAM = "rainbeam"
    WEI18N = "wei18n"


ConvertModeLiteral = Literal[ConvertMode.RAINBEAM, ConvertMode.WEI18N]
CONVERT_MODES = (ConvertMode.RAINBEAM, ConvertMode.WEI18N)


# PO entry identity
DEFAULT_CONTEXT = ""
HEADER_MSGID = ""

# Fixed PO headers
PO_CHARSET = "utf-8"
PROJECT_ID_VERSION = "placeholder"
MIME_VERSION = "1.0"
CONTENT_TYPE = "text/plain; charset=utf-8"
CONTENT_TRANSFER_ENCODING = "8bit"
PLURAL_FORMS = "nplurals=1; plural=0"

# Rainbeam files lose their metadata through PO
RAINBEAM_OUT_NAME = "out"
RAINBEAM_OUT_VERSION = "0.0.0"

REFERENCE_SEPARATOR = "\n\n"
