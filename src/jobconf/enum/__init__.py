from .client_property import ClientProperty as ClientProperty
from .durability import Durability as Durability
from .option_groups import (
    ClientOpts as ClientOpts,
    Features as Features,
    WriteOpts as WriteOpts,
)
