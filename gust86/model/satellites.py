import numbers

from enum   import IntEnum
from typing import Union

from gust86.model.errors import InvalidSatelliteIdentity


class Satellite(IntEnum):
  """
  The five major Uranian satellites covered by GUST86.
  The integer value indexes every per-satellite constant table.
  """
  MIRANDA = 0
  ARIEL   = 1
  UMBRIEL = 2
  TITANIA = 3
  OBERON  = 4

  @property
  def display_name(self) -> str:
    return self.name.capitalize()

  @classmethod
  def parse(
    cls,
    value : Union['Satellite', int, str],
  ) -> 'Satellite':
    """
    Resolve a satellite from an enum member, a table index or a name.

    Input:
    ------
      value : Satellite | int | str
        Enum member, index 0-4, or case-insensitive name (e.g. 'titania').

    Output:
    -------
      satellite : Satellite
        Matching enum member.

    Raises:
    -------
      InvalidSatelliteIdentity
        If the value does not name one of the five satellites.
    """
    if isinstance(value, cls):
      return value

    # bool is an int subclass but never a valid identity
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
      try:
        return cls(int(value))
      except ValueError:
        raise InvalidSatelliteIdentity(
          f"Satellite index {value} is not supported. Supported indices: {[s.value for s in cls]}"
        ) from None

    if isinstance(value, str):
      key = value.strip().upper()
      if key in cls.__members__:
        return cls[key]
      raise InvalidSatelliteIdentity(
        f"Satellite '{value}' is not supported. Supported names: {[s.display_name for s in cls]}"
      )

    raise InvalidSatelliteIdentity(f"Cannot interpret {value!r} as a GUST86 satellite.")
