# tests/test_topology.py
"""
Tests for NUMA node discovery.
"""

import pytest

from hwinventory.connectors import LocalConnector
from hwinventory.topology import Architecture, node_ids, topology_info


class TestNodeDiscovery:
    """Tests for node enumeration"""

    def test_node_ids_sorted(self, sysfs):
        for node_id in (2, 0, 1):
            sysfs.add_node(node_id)
        (sysfs.node_root / 'possible').write_text('0-2\n')
        (sysfs.node_root / 'has_cpu').write_text('0-2\n')

        assert node_ids(sysfs.paths, LocalConnector()) == [0, 1, 2]

    def test_missing_node_root_raises(self, sysfs):
        with pytest.raises(FileNotFoundError):
            node_ids(sysfs.paths, LocalConnector())


class TestTopologyInfo:
    """Tests for the assembled topology"""

    def test_single_node_is_smp(self, sysfs):
        sysfs.add_node(0, distances=[10])
        sysfs.add_cache(0, 0, 0)
        sysfs.add_cache(0, 1, 0, shared_cpu_map='00000002')
        sysfs.add_node_file(0, 'cpulist', '0-1\n')

        info = topology_info(sysfs.paths, LocalConnector())

        assert info.architecture is Architecture.SMP
        assert len(info.nodes) == 1
        node = info.nodes[0]
        assert node.id == 0
        assert node.logical_processors == [0, 1]
        assert node.distances == [10]
        assert len(node.caches) == 2

    def test_multiple_nodes_are_numa(self, sysfs):
        sysfs.add_node(0, distances=[10, 21])
        sysfs.add_node(1, distances=[21, 10])
        sysfs.add_cache(0, 0, 3, cache_type='Unified', level='3', size='16384K', shared_cpu_map='00000003')
        sysfs.add_cache(0, 1, 3, cache_type='Unified', level='3', size='16384K', shared_cpu_map='00000003')
        sysfs.add_cache(1, 2, 3, cache_type='Unified', level='3', size='16384K', shared_cpu_map='0000000c')
        sysfs.add_cache(1, 3, 3, cache_type='Unified', level='3', size='16384K', shared_cpu_map='0000000c')

        info = topology_info(sysfs.paths, LocalConnector())

        assert info.architecture is Architecture.NUMA
        assert [n.id for n in info.nodes] == [0, 1]
        assert info.nodes[1].distances == [21, 10]
        assert info.nodes[0].caches[0].logical_processors == [0, 1]
        assert info.nodes[1].caches[0].logical_processors == [2, 3]

    def test_missing_distance_is_empty(self, sysfs, warnings_log):
        sysfs.add_cache(0, 0, 0)

        info = topology_info(sysfs.paths, LocalConnector(), warnings_log.append)

        assert info.nodes[0].distances == []
        assert any('distance' in message for message in warnings_log)

    def test_to_dict(self, sysfs):
        sysfs.add_node(0, distances=[10])
        sysfs.add_cache(0, 0, 0, size='48K')

        data = topology_info(sysfs.paths, LocalConnector()).to_dict()

        assert data['architecture'] == 'smp'
        assert data['nodes'][0]['caches'] == [{
            'level': 1,
            'type': 'data',
            'size_bytes': 48 * 1024,
            'logical_processors': [0]
        }]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
