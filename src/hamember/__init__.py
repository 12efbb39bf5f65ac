from hamember.core import (
    Configuration,
    ConfigurationMismatch,
    IdentityResolver,
    is_multi_instance_enabled,
    load_config,
    resolve_local_member_id,
    resolve_member_id_for_address,
)
from hamember.utils.network import SocketAddress, parse_address

__version__ = "0.1.0"
