"""Weather condition glyphs and their colors."""

import logging

logger = logging.getLogger(__name__)


# =============================================================================
# Glyphs
# =============================================================================

CLEAR = r"""
    \   /
     .-.
  ― (   ) ―
     `-'
    /   \
"""

CLEARDAY = CLEAR

CLEARNIGHT = r"""
      _.._
    .' .-'`
   /  /
   |  |
   \  '.___.;
    '._  _.'
       ``
"""

CLOUDS = r"""
     .--.
  .-(    ).
 (___.__)__)
"""

CLOUDY = r"""
             .--.
          .-(    ).
   .--.  (___.__)__)
 .-(    ).
(___.__)__)
"""

CLOUDSNIGHT = r"""
   _.._
 .' .-'`  .--.
/  /   .-(    ).
|  |  (___.__)__)
\  '.___.;
 '._  _.'
"""

FOG = r"""
 _ - _ - _ -
  _ - _ - _
 _ - _ - _ -
"""

HAZE = r"""
    \   /
 _ - .-. - _
  ― (   ) ―
 _ - `-' - _
    /   \
"""

HAZENIGHT = r"""
      _.._
 _ -.' .-'` - _
   /  /
 _ |  | - _ -
   \  '.___.;
 _ -'._  _.' _
"""

PARTLYCLOUDYDAY = r"""
   \  /
 _ /"".-.
   \_(   ).
   /(___(__)
"""

PARTLYCLOUDYNIGHT = r"""
    _.._
  .' .-'`.-.
 /  /  (   ).
 \  '.(___(__)
  '._  _.'
"""

RAIN = r"""
     .-.
    (   ).
   (___(__)
    ' ' ' '
   ' ' ' '
"""

SLEET = r"""
     .-.
    (   ).
   (___(__)
    ' * ' *
   * ' * '
"""

SNOW = r"""
     .-.
    (   ).
   (___(__)
    *  *  *
   *  *  *
"""

THUNDERSTORM = r"""
     .-.
    (   ).
   (___(__)
   ,'7' ,'7'
   ' ' ' '
"""

TORNADO = r"""
 ~~~~~~~~~~
  ~~~~~~~~
   ~~~~~~
    ~~~~
     ~~
     ~
"""

WIND = r"""
  ~~~~~ ~~~~
 ~~~ ~~~~~~~~
   ~~~~~~~ ~~
"""


# =============================================================================
# Condition lookup
# =============================================================================

DEFAULT_COLOR = "blue"
NIGHT_COLOR = "bright_yellow"

# Normalized condition key -> (glyph, color)
CONDITION_ICONS: dict[str, tuple[str, str]] = {
    "clear": (CLEAR, DEFAULT_COLOR),
    "clearday": (CLEARDAY, "yellow"),
    "clearnight": (CLEARNIGHT, NIGHT_COLOR),
    "clouds": (CLOUDS, DEFAULT_COLOR),
    "cloudy": (CLOUDY, DEFAULT_COLOR),
    "cloudsnight": (CLOUDSNIGHT, NIGHT_COLOR),
    "fog": (FOG, DEFAULT_COLOR),
    "haze": (HAZE, DEFAULT_COLOR),
    "hazenight": (HAZENIGHT, NIGHT_COLOR),
    "partlycloudyday": (PARTLYCLOUDYDAY, "yellow"),
    "partlycloudynight": (PARTLYCLOUDYNIGHT, NIGHT_COLOR),
    "rain": (RAIN, DEFAULT_COLOR),
    "sleet": (SLEET, DEFAULT_COLOR),
    "snow": (SNOW, "white"),
    "thunderstorm": (THUNDERSTORM, "black"),
    "tornado": (TORNADO, "black"),
    "wind": (WIND, "black"),
}

DEFAULT_ICON: tuple[str, str] = ("", DEFAULT_COLOR)


def normalize_key(raw_key: str) -> str:
    """Strip hyphens and underscores, e.g. ``partly-cloudy-day`` -> ``partlycloudyday``."""
    return raw_key.replace("-", "").replace("_", "")


def lookup_icon(raw_key: str) -> tuple[str, str]:
    """Get the (glyph, color) pair for a condition key."""
    key = normalize_key(raw_key)
    icon = CONDITION_ICONS.get(key)
    if icon is None:
        logger.debug("Unknown condition %r, using default icon", raw_key)
        return DEFAULT_ICON
    return icon
