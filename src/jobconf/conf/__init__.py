from .store import (
    ConfigurationStore as ConfigurationStore,
    JobConfiguration as JobConfiguration,
)
from .descriptor import (
    dumps as dumps,
    loads as loads,
    to_arrow_table as to_arrow_table,
    from_arrow_table as from_arrow_table,
)
