from .keys import (
    ConsumerIdentity as ConsumerIdentity,
    enum_to_conf_key as enum_to_conf_key,
    identity_name as identity_name,
)
from .base import (
    get_client_properties as get_client_properties,
    set_client_properties as set_client_properties,
)
from .output import (
    can_create_tables as can_create_tables,
    get_batch_writer_options as get_batch_writer_options,
    get_default_table_name as get_default_table_name,
    get_simulation_mode as get_simulation_mode,
    set_create_tables as set_create_tables,
    set_default_table_name as set_default_table_name,
    set_simulation_mode as set_simulation_mode,
)
from .builder import (
    OutputConfigBuilder as OutputConfigBuilder,
    configure_output as configure_output,
)
