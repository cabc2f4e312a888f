"""ADSDASH — Display text helpers.

Descriptions in the backend were sometimes stored double-encoded
("MÃ©decins" instead of "Médecins"). `clean_corrupted_text` undoes that when
it can and otherwise leaves the text alone; it never raises.
"""

from app.dashboard.normalize import parse_created_at

# Lengths are UTF-16 code units. The length check and the slice length differ;
# both values are the observed behavior.
DESCRIPTION_TRUNCATE_THRESHOLD = 50
DESCRIPTION_SLICE_LENGTH = 150
URL_DISPLAY_LENGTH = 30
ELLIPSIS = "..."
INVALID_DATE = "Invalid Date"


def clean_corrupted_text(text: str) -> str:
    """Best-effort mojibake repair.

    Step 1 round-trips the text through its UTF-8 bytes. Step 2 reads the
    resulting code points as raw bytes and decodes them as UTF-8, which turns
    "MÃ©decins" back into "Médecins" and recovers split emoji sequences.
    Text that can't go through both steps is returned untouched.
    """
    try:
        decoded = text.encode("utf-8").decode("utf-8")
        return decoded.encode("latin-1").decode("utf-8")
    except UnicodeError:
        return text


def _utf16_length(text: str) -> int:
    """Length in UTF-16 code units; an emoji outside the BMP counts as 2."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def _utf16_prefix(text: str, units: int) -> str:
    """First `units` UTF-16 code units; a surrogate pair cut in half is dropped."""
    head = text.encode("utf-16-le", errors="surrogatepass")[: units * 2]
    return head.decode("utf-16-le", errors="ignore")


def format_description(raw: str) -> str:
    """Repaired, truncated description as shown in the table."""
    if _utf16_length(raw) > DESCRIPTION_TRUNCATE_THRESHOLD:
        head = _utf16_prefix(raw, DESCRIPTION_SLICE_LENGTH)
        shown = f"{clean_corrupted_text(head)}{ELLIPSIS}"
    else:
        shown = clean_corrupted_text(raw)
    return clean_corrupted_text(shown)


def format_url(url: str) -> str:
    if _utf16_length(url) > URL_DISPLAY_LENGTH:
        return f"{_utf16_prefix(url, URL_DISPLAY_LENGTH)}{ELLIPSIS}"
    return url


def format_created_at(value: str) -> str:
    """Local date-time string, or "Invalid Date" for unparseable values."""
    parsed = parse_created_at(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")
