from datetime import datetime
from typing import Union

from ..bodies import BodyCategory, category_of, get_body
from ..location import Location
from ..logging import get_logger
from ..space_time.julian import get_julian_date
from .lunar import moon_position
from .models import SkyPosition
from .planetary import planet_position
from .solar import sun_position

logger = get_logger(__name__)


def position_of(
    body_id: str, time: Union[datetime, float], location: Location
) -> SkyPosition:
    """
    Get the apparent sky position of a body for an observer.

    The computation dispatches on the body's catalog category: the Sun and
    the Moon have their own algorithms, everything else (including ids that
    are not in the catalog) is approximated from the Sun's position.

    Args:
        body_id: Catalog id such as "sun", "moon" or "mars".
        time: Timezone-aware datetime or Julian date (UTC).
        location: Observer location. Not range-checked.

    Returns:
        SkyPosition with azimuth in [0, 360) and altitude in degrees.
    """
    jd = get_julian_date(time)
    category = category_of(body_id)

    if category is BodyCategory.SUN:
        return sun_position(jd, location.latitude, location.longitude)
    if category is BodyCategory.MOON:
        return moon_position(jd, location.latitude, location.longitude)

    if get_body(body_id) is None:
        logger.debug(f"Unknown body '{body_id}', using the Sun with zero offset")
    return planet_position(body_id, jd, location.latitude, location.longitude)
