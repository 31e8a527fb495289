"""Downloading and caching of glcorearb.h."""

import http.client
import urllib.error
import urllib.request

from .errors import DecodeError, FetchError
from .types import GeneratorConfig


def download(url: str, timeout=None) -> bytes:
    """Fetch the raw body at url."""
    request = urllib.request.Request(url, headers={"User-Agent": "gl3w-generator"})

    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return response.read()
    except urllib.error.HTTPError as e:
        raise FetchError(url, f"HTTP {e.code} {e.reason}") from e
    except (urllib.error.URLError, TimeoutError) as e:
        raise FetchError(url, getattr(e, "reason", e)) from e
    except http.client.HTTPException as e:
        raise FetchError(url, repr(e)) from e


def decode(data: bytes, source: object) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(source, e) from e


def fetch_spec(config: GeneratorConfig) -> str:
    """Return the contents of glcorearb.h, downloading it when not cached."""
    cache_path = config.cache_path
    cache_path.parent.mkdir(parents=True, exist_ok=True)

    if config.no_cache or not cache_path.exists():
        print(f"Downloading {config.url} to {cache_path}...")
        data = download(config.url, config.timeout)
        # Only text that decodes is cached
        text = decode(data, config.url)
        cache_path.write_bytes(data)
        return text

    print(f"Reusing {cache_path}...")
    return decode(cache_path.read_bytes(), cache_path)
