import logging

import pytest
from pydantic import ValidationError

from elevatorsim import (
    ArrivalMode,
    BoardingPolicy,
    SimulationConfiguration,
    StructureVariant,
    load_configuration,
    read_property_file,
)
from elevatorsim.config import load_properties


@pytest.fixture
def write_properties(tmp_path):
    def _write(text):
        path = tmp_path / "simulation.properties"
        path.write_text(text)
        return path

    return _write


def _counts(config):
    return (config.num_floors, config.num_elevators, config.elevator_capacity, config.duration)


class TestReadPropertyFile:
    def test_reads_every_key(self, write_properties):
        path = write_properties(
            "# elevator run\n"
            "structures=linked\n"
            "floors=12\n"
            "elevators: 3\n"
            "elevatorCapacity = 6\n"
            "duration=90\n"
            "boarding=Origin\n"
            "arrivals=current\n"
            "arrivalProbability=0.5\n"
            "seed=99\n"
        )
        config = read_property_file(path)

        assert config.structures is StructureVariant.LINKED
        assert _counts(config) == (12, 3, 6, 90)
        assert config.boarding is BoardingPolicy.ORIGIN
        assert config.arrivals is ArrivalMode.CURRENT
        assert config.arrival_probability == 0.5
        assert config.seed == 99

    def test_missing_keys_take_parse_defaults(self, write_properties):
        config = read_property_file(write_properties("floors=4\n"))
        assert _counts(config) == (4, 1, 10, 500)
        assert config.structures is StructureVariant.LINKED
        assert config.boarding is BoardingPolicy.DESTINATION
        assert config.seed is None

    def test_keys_are_case_sensitive(self, write_properties):
        config = read_property_file(write_properties("ElevatorCapacity=3\nelevatorCapacity=4\n"))
        assert config.elevator_capacity == 4

    def test_missing_file_falls_back(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="elevatorsim.config"):
            config = read_property_file(tmp_path / "absent.properties")
        assert _counts(config) == (10, 1, 10, 500)
        assert config.structures is StructureVariant.LINKED
        assert "using defaults" in caplog.text

    @pytest.mark.parametrize(
        "text",
        [
            "floors=ten\n",
            "duration=12.5\n",
            "structures=tree\n",
            "arrivalProbability=2\n",
        ],
    )
    def test_malformed_input_falls_back_entirely(self, write_properties, text):
        config = read_property_file(write_properties("elevators=4\n" + text))
        assert _counts(config) == (10, 1, 10, 500)

    def test_non_positive_values_survive_parsing(self, write_properties):
        config = read_property_file(write_properties("floors=-3\nduration=0\n"))
        assert config.num_floors == -3
        assert config.duration == 0

    def test_blank_seed_means_unseeded(self, write_properties):
        assert read_property_file(write_properties("seed=\n")).seed is None

    def test_bracket_line_is_an_ordinary_key(self, write_properties):
        config = read_property_file(write_properties("floors=4\n[extra]\nelevators=3\n"))
        assert (config.num_floors, config.num_elevators) == (4, 3)

    def test_indented_lines_are_read(self, write_properties):
        config = read_property_file(write_properties("floors=4\n  elevators=3\nduration=40\n"))
        assert (config.num_floors, config.num_elevators, config.duration) == (4, 3, 40)

    def test_whitespace_separates_key_and_value(self, write_properties):
        config = read_property_file(write_properties("floors 4\nelevators=3\n"))
        assert (config.num_floors, config.num_elevators) == (4, 3)

    def test_echo_keeps_configured_structures_text(self, tmp_path):
        assert read_property_file(tmp_path / "absent.properties").describe()[0] == "structures : list"

    def test_load_properties_ignores_comments(self, write_properties):
        path = write_properties("! comment\n# another\nfloors=7\n")
        assert load_properties(path) == {"floors": "7"}


class TestFallbacks:
    def test_unconfigured_run_uses_top_level_fallbacks(self):
        config = load_configuration()
        assert _counts(config) == (32, 1, 10, 500)
        assert config.structures is StructureVariant.ARRAY

    def test_non_positive_counts_are_replaced(self, write_properties):
        config = load_configuration(write_properties("floors=-3\nelevators=0\nelevatorCapacity=2\nduration=0\n"))
        assert _counts(config) == (32, 1, 2, 500)

    def test_positive_counts_are_kept(self):
        config = SimulationConfiguration(floors=3, elevators=2, elevatorCapacity=4, duration=9)
        assert _counts(config.with_fallbacks()) == (3, 2, 4, 9)

    def test_configuration_is_frozen(self):
        config = SimulationConfiguration()
        with pytest.raises(ValidationError):
            config.duration = 10

    def test_describe_echoes_settings(self):
        config = SimulationConfiguration(structures="array", floors=3, elevators=2, elevatorCapacity=4, duration=9)
        assert config.describe() == [
            "structures : array",
            "Num Floors : 3",
            "Num Elevators : 2",
            "Num elevatorCapacity :4",
            "Num duration : 9",
        ]
