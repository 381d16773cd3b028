# -*- coding: utf-8 -*-
"""
Tests of CSV loading, saving and the relationship export.
"""

import pytest

from healthnet.analysis import dijkstra
from healthnet.pre import HealthNetwork, NetworkStorage

FACILITY_HEADER = "ID,Name,District,Latitude,Longitude,Capacity"
CONNECTION_HEADER = "FromID,ToID,DistanceKM,TimeMinutes,Description"


@pytest.fixture
def storage(tmp_path):
    return NetworkStorage({"data_dir": str(tmp_path)})


def _write(path, *lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_missing_files_are_created(storage, tmp_path):
    network = storage.read_csv()
    assert len(network) == 0
    assert (tmp_path / "health_centers.csv").read_text().strip() == FACILITY_HEADER
    assert (tmp_path / "connections.csv").read_text().strip() == CONNECTION_HEADER


def test_missing_file_without_creation(tmp_path):
    storage = NetworkStorage({"data_dir": str(tmp_path), "create_if_missing": False})
    with pytest.raises(FileNotFoundError):
        storage.read_csv()


def test_read_valid_files(storage, tmp_path):
    _write(
        tmp_path / "health_centers.csv",
        FACILITY_HEADER,
        "1, A ,Gasabo,-1.9441,30.0619,5",
        "2,B,Kicukiro,-1.9700,30.1000,50",
        "3,C,Nyarugenge,-1.9500,30.0500,10",
    )
    _write(
        tmp_path / "connections.csv",
        CONNECTION_HEADER,
        "1,2,10.00,15,Main road",
        "2,3,5.00,8,",
        '1,3,20.00,25,"Highway, north exit"',
    )
    network = storage.read_csv()

    assert network.facility_ids() == [1, 2, 3]
    assert network.get_facility(1).name == "A"
    assert network.get_facility(2).lat == pytest.approx(-1.97)
    assert network.get_connection(2, 3).description == ""
    assert network.get_connection(1, 3).description == "Highway, north exit"
    assert dijkstra(network, 1, 3).distance == pytest.approx(15.0)
    assert storage.skipped == []


def test_bad_rows_are_skipped(storage, tmp_path, capsys):
    _write(
        tmp_path / "health_centers.csv",
        FACILITY_HEADER,
        "1,A,Gasabo,-1.9441,30.0619,5",
        "x,Broken,Gasabo,-1.9,30.0,5",
        "2,,Gasabo,-1.9,30.0,5",
        "3,C,Gasabo,95.0,30.0,5",
        "4,D,Gasabo,-1.9,30.0,0",
        "1,Duplicate,Gasabo,-1.9,30.0,5",
        "5,E,Gasabo,-1.9,30.0,12",
    )
    _write(
        tmp_path / "connections.csv",
        CONNECTION_HEADER,
        "1,5,3.5,10,ok",
        "1,9,3.5,10,unknown target",
        "5,5,1.0,1,self loop",
        "1,5,2.0,4,duplicate",
        "5,1,abc,4,bad distance",
        "5,1,-2.0,4,negative",
    )
    network = storage.read_csv()

    assert network.facility_ids() == [1, 5]
    assert [c.key for c in network.connections()] == [(1, 5)]
    assert len(storage.skipped) == 10

    out = capsys.readouterr().out
    assert "Connection references non-existent health center(s): 1 -> 9" in out
    assert out.count("Warning:") == 10


def test_missing_column(storage, tmp_path):
    _write(tmp_path / "health_centers.csv", "ID,Name,Latitude,Longitude,Capacity", "1,A,0,0,1")
    with pytest.raises(ValueError, match="District"):
        storage.read_csv()


def test_read_into_non_empty_network(storage, scenario):
    with pytest.raises(ValueError):
        storage.read_csv(scenario)


def test_save_and_reload(storage, scenario, tmp_path):
    storage.to_csv(scenario)

    facilities = (tmp_path / "health_centers.csv").read_text().splitlines()
    assert facilities[0] == FACILITY_HEADER
    assert facilities[1].startswith("1,A,Central,")
    assert facilities[1].split(",")[3] == "-1.9400"

    connections = (tmp_path / "connections.csv").read_text().splitlines()
    assert connections[0] == CONNECTION_HEADER
    assert connections[1] == "1,2,10.00,15,Main road"

    reloaded = NetworkStorage({"data_dir": str(tmp_path)}).read_csv()
    assert [f.name for f in reloaded.facilities()] == ["A", "B", "C"]
    assert reloaded.get_facility(2).capacity == 50
    assert reloaded.get_facility(3).lon == pytest.approx(scenario.get_facility(3).lon)
    assert reloaded.connections() == scenario.connections()


def test_export_relationships(storage, district, tmp_path):
    path = storage.export_relationships(district)
    assert path == tmp_path / "relationship_table.csv"

    lines = path.read_text().splitlines()
    assert lines[0] == "Health Center ID,Health Center Name,Connected To,Distance (km),Time (min),Description"
    assert lines[1] == "101,Kigali Hospital,102,4.00,10,KG 11 Ave"
    assert lines[-1] == "107,Remote Post,None,0,0,-"
    assert '"Gikondo, industrial zone"' in path.read_text()
    assert len(lines) == 1 + 7 + 2


def test_export_relationships_uses_configured_decimals(district, tmp_path):
    storage = NetworkStorage({"data_dir": str(tmp_path), "decimals": 1})
    lines = storage.export_relationships(district).read_text().splitlines()
    assert lines[1] == "101,Kigali Hospital,102,4.0,10,KG 11 Ave"
    assert lines[-1] == "107,Remote Post,None,0,0,-"


def test_config_as_object(tmp_path):
    from healthnet.utils import ParamConfig

    config = ParamConfig(data_dir=str(tmp_path), facilities_file="centers.csv")
    storage = NetworkStorage(config)
    assert storage.facilities_path == tmp_path / "centers.csv"
    assert isinstance(storage.read_csv(), HealthNetwork)
