"""Static metadata describing DCAUTO Quiz."""

APP_NAME = "DCAUTO Quiz"
APP_VERSION = "1.2"
APP_SUBTITLE = "v1.2 Multiple Choice"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "DCAUTO Quiz is a timed multiple-choice drill for the data center automation "
    "exam blueprint. Pick a domain, answer against a 20 minute clock, and missed "
    "cards come back at the end of the deck until you get them right."
)

HELP_TEXT = (
    "Questions are loaded from a plain .txt file. Each block describes one card:\n\n"
    "ID: npf-001\n"
    "DOMAIN: 1.0\n"
    "Q: Which HTTP method is idempotent and used to replace a resource?\n"
    "A: PUT\n\n"
    "DOMAIN accepts the full label, the numeric code (1.0 - 4.0) or the short "
    "name (NPF, ACI, NXOS, UCS). Wrong options are drawn from the answers of "
    "other cards, preferring the same domain."
)
