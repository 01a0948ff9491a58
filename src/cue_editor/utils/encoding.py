"""Encoding detection for CUE files"""
import chardet

DEFAULT_ENCODING = "utf-8"


def detect_encoding(cue_path, log_func=None):
    """
    Detect the text encoding of a CUE file.

    Args:
        cue_path: Path to the CUE file
        log_func: Optional function to call for logging messages

    Returns:
        Encoding name usable with open(); ASCII is reported as UTF-8
    """
    if log_func is None:
        log_func = lambda msg: None

    with open(cue_path, 'rb') as f:
        raw_data = f.read()

    result = chardet.detect(raw_data) or {}
    detected_encoding = result.get('encoding')
    confidence = result.get('confidence') or 0

    if not detected_encoding:
        log_func(f"⚠️ Could not detect encoding, assuming {DEFAULT_ENCODING}")
        return DEFAULT_ENCODING

    log_func(f"📝 CUE file encoding detected: {detected_encoding} (confidence: {confidence:.2%})")

    if detected_encoding.upper() in ('UTF-8', 'ASCII'):
        return DEFAULT_ENCODING
    return detected_encoding
