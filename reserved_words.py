"""Words dropped from every wordlist: language keywords and browser globals."""

LANGUAGE_KEYWORDS = frozenset([
    'await', 'break', 'case', 'catch', 'class',
    'const', 'continue', 'debugger', 'default', 'delete',
    'do', 'else', 'enum', 'export', 'extends',
    'false', 'finally', 'for', 'function', 'if',
    'implements', 'import', 'in', 'instanceof', 'interface',
    'let', 'new', 'null', 'package', 'private',
    'protected', 'public', 'return', 'super', 'switch',
    'static', 'this', 'throw', 'try', 'true',
    'typeof', 'var', 'void', 'while', 'with',
    'abstract', 'boolean', 'byte', 'char', 'double',
    'final', 'float', 'goto', 'int', 'long',
    'native', 'short', 'synchronized', 'throws', 'transient',
    'volatile', 'yield',
])

# window / document properties and methods
BROWSER_GLOBALS = frozenset([
    'alert', 'frames', 'outerheight', 'all', 'framerate',
    'outerwidth', 'anchor', 'packages',
    'anchors', 'getclass', 'pagexoffset', 'area',
    'hasownproperty', 'pageyoffset', 'array', 'hidden',
    'parent', 'assign', 'history', 'parsefloat', 'blur',
    'image', 'parseint', 'button', 'images', 'password',
    'checkbox', 'infinity', 'pkcs11', 'clearinterval',
    'isfinite', 'plugin', 'cleartimeout', 'isnan',
    'prompt', 'clientinformation', 'isprototypeof',
    'propertyisenum', 'close', 'java', 'prototype',
    'closed', 'javaarray', 'radio', 'confirm', 'javaclass',
    'reset', 'constructor', 'javaobject', 'screenx',
    'crypto', 'javapackage', 'screeny', 'date',
    'innerheight', 'scroll', 'decodeuri', 'innerwidth',
    'secure', 'decodeuricomponent', 'layer', 'select',
    'defaultstatus', 'layers', 'self', 'document',
    'length', 'setinterval', 'element', 'link',
    'settimeout', 'elements', 'location', 'status',
    'embed', 'math', 'string', 'embeds', 'mimetypes',
    'submit', 'encodeuri', 'name', 'taint',
    'encodeuricomponent', 'nan', 'text', 'escape',
    'navigate', 'textarea', 'eval', 'navigator', 'top',
    'event', 'number', 'tostring', 'fileupload', 'object',
    'undefined', 'focus', 'offscreenbuffering', 'unescape',
    'form', 'open', 'untaint', 'forms', 'opener',
    'valueof', 'frame', 'option', 'window',
])

RESERVED_WORDS = LANGUAGE_KEYWORDS | BROWSER_GLOBALS


def is_reserved(word, reserved=RESERVED_WORDS):
    return word.lower() in reserved
