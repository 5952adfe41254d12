from intolink.utils.config import AppSettings, load_config
from intolink.utils.helpers import get_short_url
from intolink.utils.shortener import ShortcodeGenerator, generate_shortcode
from intolink.utils.logging import initialize_logging


__all__ = [
    'ShortcodeGenerator',
    'generate_shortcode',
    'AppSettings',
    'load_config',
    'get_short_url',
    'initialize_logging',
]
