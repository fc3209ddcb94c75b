"""
Unit Tests for network configuration and deployment records
"""

import json
import pytest

from utils.network_config import load_network_config
from utils.deployment_record import DeploymentRecord


PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'


@pytest.fixture
def config_path(tmp_path):
    """Network definitions"""
    path = tmp_path / 'network_config.json'
    path.write_text(json.dumps({
        'default_network': 'localhost',
        'networks': {
            'localhost': {
                'name': 'Local Node',
                'rpc_url_env': 'LOCALHOST_RPC_URL',
                'rpc_url': 'http://127.0.0.1:8545',
                'chain_id': 31337,
                'confirmation_timeout': 60,
                'poll_interval': 0.5
            },
            'mumbai': {
                'name': 'Polygon Mumbai',
                'rpc_url_env': 'MUMBAI_RPC_URL',
                'chain_id': 80001
            }
        }
    }))
    return str(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ['DEPLOY_NETWORK', 'LOCALHOST_RPC_URL', 'MUMBAI_RPC_URL', 'ARTIFACTS_DIR', 'NETWORK_CONFIG_PATH']:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv('DEPLOYER_PRIVATE_KEY', PRIVATE_KEY)


class TestNetworkConfig:
    """Test network selection"""

    def test_default_network(self, config_path):
        config = load_network_config(config_path=config_path)

        assert config.network == 'localhost'
        assert config.rpc_url == 'http://127.0.0.1:8545'
        assert config.chain_id == 31337
        assert config.confirmation_timeout == 60
        assert config.artifacts_dir == 'artifacts'

    def test_config_path_from_environment(self, config_path, monkeypatch):
        monkeypatch.setenv('NETWORK_CONFIG_PATH', config_path)

        assert load_network_config().network == 'localhost'

    def test_network_from_environment(self, config_path, monkeypatch):
        monkeypatch.setenv('DEPLOY_NETWORK', 'mumbai')
        monkeypatch.setenv('MUMBAI_RPC_URL', 'https://rpc-mumbai.example')

        config = load_network_config(config_path=config_path)

        assert config.network == 'mumbai'
        assert config.rpc_url == 'https://rpc-mumbai.example'
        assert config.chain_id == 80001
        assert config.confirmation_timeout == 300

    def test_env_rpc_url_overrides_default(self, config_path, monkeypatch):
        monkeypatch.setenv('LOCALHOST_RPC_URL', 'http://node:8545')

        assert load_network_config(config_path=config_path).rpc_url == 'http://node:8545'

    def test_unknown_network(self, config_path):
        with pytest.raises(ValueError, match='Unknown network'):
            load_network_config('ropsten', config_path=config_path)

    def test_missing_rpc_url(self, config_path):
        with pytest.raises(ValueError, match='MUMBAI_RPC_URL'):
            load_network_config('mumbai', config_path=config_path)

    def test_missing_private_key(self, config_path, monkeypatch):
        monkeypatch.delenv('DEPLOYER_PRIVATE_KEY')

        with pytest.raises(ValueError, match='DEPLOYER_PRIVATE_KEY'):
            load_network_config(config_path=config_path)

    def test_repr_hides_private_key(self, config_path):
        config = load_network_config(config_path=config_path)

        assert PRIVATE_KEY not in repr(config)


class TestDeploymentRecord:
    """Test deployment history"""

    def test_empty(self, tmp_path):
        record = DeploymentRecord('localhost', deployments_dir=str(tmp_path))

        assert record.load() == []
        assert record.latest('ChainBattles') is None

    def test_save_and_latest(self, tmp_path):
        record = DeploymentRecord('mumbai', deployments_dir=str(tmp_path / 'deployments'))

        assert record.save('ChainBattles', '0xE6fB82D0591D138cea060FeC47E426E273E3b4f9', '0x01', 80001)
        assert record.save('ChainBattles', '0x5FbDB2315678afecb367f032d93F642f64180aa3', '0x02', 80001)

        latest = record.latest('ChainBattles')
        assert latest['address'] == '0x5FbDB2315678afecb367f032d93F642f64180aa3'
        assert latest['chain_id'] == 80001
        assert len(record.load()) == 2
        assert (tmp_path / 'deployments' / 'mumbai.json').exists()

    def test_write_failure_returns_false(self, tmp_path):
        blocker = tmp_path / 'deployments'
        blocker.write_text('not a directory')
        record = DeploymentRecord('localhost', deployments_dir=str(blocker))

        assert not record.save('ChainBattles', '0xABC123')


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
