import argparse
import logging
import re
import string
import sys
import time
from urllib.parse import urlsplit, unquote, unquote_plus

import requests

from reserved_words import RESERVED_WORDS, is_reserved

DEFAULT_TIMEOUT = 10
CHUNK_SIZE = 64 * 1024
HEX_DIGITS = frozenset(string.hexdigits)
USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"

WORD_PATTERN = re.compile(r'[a-zA-Z0-9_\-.]+')
PATH_DELIMITERS = re.compile(r'[/\-_.=]+')
QUERY_DELIMITERS = re.compile(r'[&=;]+')
SCHEME_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*')
BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')

USAGE_EXAMPLES = """examples:
  kew -js https://example.com/js/main.js
  kew -url https://example.com/path/resource?param=value
  cat jsfiles.txt | kew -js
  cat urls.txt | kew -url
"""

log = logging.getLogger('kew')


class URLParseError(ValueError):
    def __init__(self, url, reason):
        super().__init__(reason)
        self.url = url


class FetchError(Exception):
    def __init__(self, url, reason):
        super().__init__(reason)
        self.url = url


class InputError(Exception):
    pass


def is_ascii_letter(char):
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z')


def is_obfuscated_hex(word):
    """Minified hashes and chunk ids: six or more chars, over 80% hex digits."""
    if len(word) < 6:
        return False
    hex_count = sum(1 for c in word if c in HEX_DIGITS)
    return hex_count / len(word) > 0.8


def word_filter(words, min_length=1, max_length=None, drop_obfuscated=False):
    filtered = set()
    for w in words:
        if drop_obfuscated and is_obfuscated_hex(w):
            continue
        if len(w) < min_length:
            continue
        if max_length is not None and len(w) > max_length:
            continue
        filtered.add(w)
    return filtered


def _starts_new_part(segment, i):
    char, prev = segment[i], segment[i - 1]
    if char.isupper():
        if not prev.isupper():
            return True
        # end of an acronym: "HTMLParser" -> "HTML", "Parser"
        return i + 1 < len(segment) and segment[i + 1].islower()
    return char.isdigit() and prev.isalpha()


def split_camel_case(segment):
    """Split an identifier at case changes and letter/digit boundaries.

    "getUserID2" -> ["get", "User", "ID", "2"]
    """
    parts = []
    start = 0
    for i in range(1, len(segment)):
        if _starts_new_part(segment, i):
            parts.append(segment[start:i])
            start = i
    if segment:
        parts.append(segment[start:])
    return parts


def parse_url(url):
    """Split a URL into components, rejecting strings that are not URLs.

    urlsplit() accepts almost anything, so the scheme and control character
    checks are done here first. Raises URLParseError.
    """
    for c in url:
        if ord(c) < 0x20 or ord(c) == 0x7f:
            raise URLParseError(url, "invalid control character in URL")
    head = re.split(r'[/?#]', url, maxsplit=1)[0]
    if ':' in head:
        scheme = head.split(':', 1)[0]
        if not scheme:
            raise URLParseError(url, "missing protocol scheme")
        if not SCHEME_PATTERN.fullmatch(scheme):
            raise URLParseError(url, "first path segment in URL cannot contain colon")
    try:
        parts = urlsplit(url)
        parts.port
    except ValueError as e:
        raise URLParseError(url, str(e)) from e
    return parts


def percent_decode(value, plus_as_space=False):
    if BAD_ESCAPE.search(value):
        raise ValueError(f"invalid URL escape in {value!r}")
    if plus_as_space:
        return unquote_plus(value, errors='strict')
    return unquote(value, errors='strict')


def decode_or_raw(value, plus_as_space=False):
    try:
        return percent_decode(value, plus_as_space)
    except ValueError as e:
        log.debug(f"Keeping undecoded {value!r}: {e}")
        return value


def split_segments(pattern, text):
    return [s for s in pattern.split(text) if s]


class WordExtractor:
    """Pulls wordlist candidates out of script text and URL structure.

    The word pattern and reserved table are per-instance so alternate tables
    can be plugged in. Each call builds and returns a fresh set.
    """

    def __init__(self, reserved=RESERVED_WORDS, pattern=WORD_PATTERN):
        self.reserved = reserved
        self.pattern = pattern

    def is_reserved(self, word):
        return is_reserved(word, self.reserved)

    def extract_words(self, content):
        words = set()
        for match in self.pattern.finditer(content):
            token = match.group(0)
            if '.' in token:
                # member access chain: keep the property name
                word = token.split('.')[-1]
            elif len(token) == 1:
                word = token if is_ascii_letter(token) else ''
            else:
                word = token
            if word and not self.is_reserved(word):
                words.add(word)
        return words

    def extract_url_words(self, url):
        parts = parse_url(url)
        path = decode_or_raw(parts.path)
        query = decode_or_raw(parts.query, plus_as_space=True)

        words = set()
        segments = split_segments(PATH_DELIMITERS, path) + split_segments(QUERY_DELIMITERS, query)
        for segment in segments:
            if self.is_reserved(segment):
                continue
            words.add(segment)
            for part in split_camel_case(segment):
                if not self.is_reserved(part):
                    words.add(part)
        return words


def is_script_url(url):
    return '://' in url and '.js' in url


def new_session():
    session = requests.Session()
    session.headers['User-Agent'] = USER_AGENT
    return session


def fetch_url(session, url, timeout=DEFAULT_TIMEOUT):
    """GET a script body, bounding the whole transfer by ``timeout`` seconds.

    The requests timeout only covers the connect and each socket read, so the
    body is streamed and the overall deadline is checked between chunks.
    """
    deadline = time.monotonic() + timeout
    body = bytearray()
    try:
        with session.get(url, timeout=timeout, stream=True) as resp:
            if resp.status_code != 200:
                raise FetchError(url, f"HTTP error: {resp.status_code}")
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                if time.monotonic() > deadline:
                    raise FetchError(url, f"Read timed out after {timeout} seconds")
                body.extend(chunk)
            encoding = resp.encoding or 'utf-8'
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e
    try:
        return body.decode(encoding, errors='replace')
    except LookupError:
        return body.decode('utf-8', errors='replace')


def process_url(url, args, extractor, session):
    if args.url:
        try:
            words = extractor.extract_url_words(url)
        except URLParseError as e:
            log.error(f"Error parsing URL {url}: {e}")
            return set()
    elif args.js:
        if not is_script_url(url):
            log.warning(f"Bad URL: {url}, please check your url, pass..")
            return set()
        try:
            content = fetch_url(session, url, timeout=args.timeout)
        except FetchError as e:
            log.error(f"Error fetching {url}: {e}")
            return set()
        log.debug(f"Fetched {len(content)} characters from {url}")
        words = extractor.extract_words(content)
    else:
        log.warning("No processing mode specified. Use -js or -url flag.")
        return set()
    return word_filter(words, args.min_length, args.max_length, args.drop_obfuscated)


def iter_inputs(urls, stream):
    if urls:
        yield from urls
        return
    try:
        for line in stream:
            line = line.strip()
            if line:
                yield line
    except OSError as e:
        raise InputError(str(e)) from e


def print_words(words):
    for word in sorted(words):
        print(word)


def setup_logging(level):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('[%(levelname).1s] %(message)s'))
    log.handlers = [handler]
    log.setLevel(level)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="kew",
        description="Extract wordlist tokens from JavaScript files or URL paths and queries.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="URLs to process (read from stdin when omitted)")
    parser.add_argument("-js", "--js", action="store_true", help="Extract keywords from JavaScript files")
    parser.add_argument("-url", "--url", action="store_true", help="Extract keywords from URL paths and query parameters")
    parser.add_argument("--min-length", type=int, default=1, help="Minimum word length")
    parser.add_argument("--max-length", type=int, default=None, help="Maximum word length")
    parser.add_argument("--drop-obfuscated", action="store_true", help="Drop hex-like words")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Fetch timeout in seconds")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_const", dest="loglevel", const=logging.DEBUG,
                           default=logging.INFO, help="Enable debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_const", dest="loglevel", const=logging.ERROR,
                           help="Only log errors")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.loglevel)

    # undecodable bytes only spoil their own line
    if not args.urls and hasattr(sys.stdin, 'reconfigure'):
        sys.stdin.reconfigure(errors='replace')

    extractor = WordExtractor()
    session = new_session()
    try:
        for url in iter_inputs(args.urls, sys.stdin):
            print_words(process_url(url, args, extractor, session))
    except InputError as e:
        log.error(f"Error reading from stdin: {e}")
        return 1
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
