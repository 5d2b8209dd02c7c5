"""Styling modes. Each module defines a `mode`; see colour_by_value.registry.

Modules are imported explicitly so freezing tools bundle them.
"""

import colour_by_value.modes.all as _all  # noqa: F401
import colour_by_value.modes.census as _census  # noqa: F401
import colour_by_value.modes.clear as _clear  # noqa: F401
import colour_by_value.modes.condition as _condition  # noqa: F401
import colour_by_value.modes.discrete as _discrete  # noqa: F401
import colour_by_value.modes.formatted as _formatted  # noqa: F401
import colour_by_value.modes.preview as _preview  # noqa: F401
import colour_by_value.modes.random_hsl as _random_hsl  # noqa: F401
