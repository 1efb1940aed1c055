# stateerrors/utils/constants.py
# Version: 0.1.0
# Rendering constants shared by both failure representations.
# Changing any value below changes the rendered text surface of the package;
# downstream log parsers match on these strings exactly.
#
# Standard import pattern:
#   from stateerrors.utils.constants import (
#       LIST_VARIANT_TAG,
#       CHAIN_VARIANT_TAG,
#       CHAIN_SEPARATOR,
#       SUMMARY_SEPARATOR,
#       REPORT_LINE_TERMINATOR,
#   )


# ---------------------------------------------------------------------------
# FAILURE RENDERING
# ---------------------------------------------------------------------------
# Rendered failure text: "<tag>: <severity>: <message>"

LIST_VARIANT_TAG:  str = "StateError"         # flat collection variant
CHAIN_VARIANT_TAG: str = "WrappedStateError"  # linked chain variant

RENDER_FORMAT: str = "{tag}: {severity}: {message}"


# ---------------------------------------------------------------------------
# AGGREGATE RENDERING
# ---------------------------------------------------------------------------

CHAIN_SEPARATOR:        str = "->"   # report(head) joins nodes in link order
SUMMARY_SEPARATOR:      str = ", "   # StatusSummary joins messages per severity
REPORT_LINE_TERMINATOR: str = "\n"   # render_list() terminates every line
