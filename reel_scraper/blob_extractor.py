"""
Blob URL extraction.

A ``blob:`` URL only resolves inside the page that created it, so the bytes
are fetched by a script running in the browser, base64 encoded there and
decoded again on this side.
"""

import base64
import binascii

from selenium.common.exceptions import WebDriverException

from .exceptions import BlobExtractionError


# arguments[0] is the blob URL, the last argument is the WebDriver callback.
# Resolves with the base64 payload or {error: message}.
FETCH_BLOB_SCRIPT = """
const blobUrl = arguments[0];
const done = arguments[arguments.length - 1];
fetch(blobUrl)
  .then(response => response.blob())
  .then(blob => {
    const reader = new FileReader();
    reader.onloadend = () => {
      const result = reader.result || '';
      const comma = result.indexOf(',');
      done(comma >= 0 ? result.slice(comma + 1) : '');
    };
    reader.onerror = () => done({error: String(reader.error)});
    reader.readAsDataURL(blob);
  })
  .catch(error => done({error: String(error && error.message || error)}));
"""


def extract_blob(driver, blob_url: str, timeout: float = 60.0) -> bytes:
    """
    Fetch the bytes behind a blob URL from inside the page.

    Args:
        driver: Browser session on the page that owns the blob
        blob_url: The ``blob:`` URL
        timeout: Seconds to allow the in-page routine to finish

    Returns:
        Decoded video bytes (never empty)

    Raises:
        BlobExtractionError: If the in-page fetch fails or yields no data
    """
    print(f"Attempting to download blob video from: {blob_url}")
    driver.set_script_timeout(timeout)

    try:
        result = driver.execute_async_script(FETCH_BLOB_SCRIPT, blob_url)
    except WebDriverException as e:
        raise BlobExtractionError(f"In-page blob fetch failed: {e.msg or e}") from e

    if isinstance(result, dict):
        raise BlobExtractionError(f"In-page blob fetch rejected: {result.get('error', 'unknown error')}")
    if not result:
        raise BlobExtractionError("Failed to retrieve base64 data from blob")

    try:
        data = base64.b64decode(result, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise BlobExtractionError(f"Blob payload is not valid base64: {e}") from e

    if not data:
        raise BlobExtractionError("Blob decoded to an empty payload")

    print(f"  Decoded {len(data)} bytes from blob")
    return data
