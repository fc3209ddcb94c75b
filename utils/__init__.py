"""
Utilities Package
Network configuration and deployment bookkeeping
"""

from .network_config import NetworkConfig, load_network_config
from .deployment_record import DeploymentRecord

__all__ = [
    'NetworkConfig',
    'load_network_config',
    'DeploymentRecord'
]
