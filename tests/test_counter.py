import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from lipidmol import (
    MAX_COUNT,
    Counter,
    MalformedCountError,
    Saturation,
    UnknownSpeciesError,
)
from lipidmol.core.domain.models.counter import atom_count_pattern, saturating_add


class TestParse:
    """Tests for reading formula text."""

    def test_worked_example(self, carbon, hydrogen, oxygen):
        """Repeated symbols accumulate across the string."""
        counter = Counter.parse("C2H5OH")

        assert counter.count(carbon) == 2
        assert counter.count(hydrogen) == 6
        assert counter.count(oxygen) == 1
        assert len(counter) == 3

    def test_matches_explicit_accumulation(self, carbon, hydrogen, oxygen):
        expected = Counter.from_pairs(
            [(carbon, 2), (hydrogen, 5), (oxygen, 1), (hydrogen, 1)]
        )
        assert Counter.parse("C2H5OH") == expected

    def test_empty_text(self):
        assert Counter.parse("") == Counter()
        assert Counter.parse("").render() == ""

    def test_two_letter_symbols(self, lookup):
        counter = Counter.parse("NaCl")
        assert counter.count(lookup.lookup("Na")) == 1
        assert counter.count(lookup.lookup("Cl")) == 1

    def test_leading_zeros(self, carbon):
        assert Counter.parse("C007").count(carbon) == 7

    def test_unknown_species(self):
        with pytest.raises(UnknownSpeciesError) as excinfo:
            Counter.parse("CQz2")
        assert excinfo.value.symbol == "Qz"
        assert excinfo.value.position == 1
        assert excinfo.value.formula == "CQz2"

    def test_zero_count(self):
        with pytest.raises(MalformedCountError) as excinfo:
            Counter.parse("C0H4")
        assert excinfo.value.digits == "0"

    def test_count_overflow(self):
        with pytest.raises(MalformedCountError):
            Counter.parse(f"C{MAX_COUNT + 1}")

    def test_very_long_count(self):
        digits = "9" * 5000
        with pytest.raises(MalformedCountError) as excinfo:
            Counter.parse(f"C{digits}")
        assert excinfo.value.digits == digits
        assert excinfo.value.position == 1

    def test_long_run_of_leading_zeros(self, carbon):
        assert Counter.parse("C" + "0" * 40 + "2").count(carbon) == 2

    @pytest.mark.parametrize("text", ["CH3-CH3", "C2 H6", "(C2H6)", "C2H6\n", "C2.H6"])
    def test_characters_outside_tokens_are_skipped(self, text):
        assert Counter.parse(text) == Counter.parse("C2H6")

    def test_text_without_tokens(self):
        assert Counter.parse("c2 - 4") == Counter()

    def test_formula_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Counter.parse("Qz")

    def test_injected_lookup(self, integer_mass_lookup):
        counter = Counter.parse("CH4", integer_mass_lookup)
        assert counter.weight() == 16.0
        with pytest.raises(UnknownSpeciesError):
            Counter.parse("CH3OH", integer_mass_lookup)

    def test_pattern_is_built_once(self):
        assert atom_count_pattern() is atom_count_pattern()

    def test_parallel_parsing(self):
        formulas = ["C2H5OH", "C18H34O2", "NaCl", "H2O"] * 25
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(Counter.parse, formulas))
        assert [counter.render() for counter in results[:4]] == [
            "H6C2O",
            "H34C18O2",
            "NaCl",
            "H2O",
        ]


class TestRender:
    """Tests for canonical formula text."""

    def test_worked_example(self):
        assert Counter.parse("C2H5OH").render() == "H6C2O"
        assert str(Counter.parse("C2H5OH")) == "H6C2O"

    def test_ascending_atomic_number(self):
        assert Counter.parse("ClNaO4").render() == "O4NaCl"
        assert Counter.parse("OH2").render() == "H2O"

    def test_isotopes_follow_their_element(self):
        assert Counter.parse("OD2").render() == "D2O"
        assert Counter.parse("DHO").render() == "HDO"
        assert Counter.parse("TDH").render() == "HDT"

    def test_independent_of_insertion_order(self, carbon, hydrogen, oxygen):
        pairs = [(oxygen, 1), (carbon, 2), (hydrogen, 6)]
        assert Counter.from_pairs(pairs).render() == Counter.from_pairs(reversed(pairs)).render()

    @pytest.mark.parametrize(
        "text", ["H2O", "C6H12O6", "C18H34O2", "NaCl", "CH3COOH", "D2O", "C60", "UF6"]
    )
    def test_round_trip(self, text):
        counter = Counter.parse(text)
        assert Counter.parse(counter.render()) == counter


class TestAccumulation:
    """Tests for building counters from pairs."""

    def test_order_independence(self, carbon, hydrogen, oxygen):
        pairs = [(carbon, 2), (hydrogen, 5), (oxygen, 1), (hydrogen, 1)]
        counters = {Counter.from_pairs(order) for order in itertools.permutations(pairs)}
        assert len(counters) == 1

    def test_saturating_addition(self, hydrogen):
        counter = Counter.from_pairs([(hydrogen, MAX_COUNT), (hydrogen, 5)])
        assert counter.count(hydrogen) == MAX_COUNT
        assert saturating_add(MAX_COUNT - 1, 1) == MAX_COUNT
        assert saturating_add(2, 3) == 5

    def test_parse_saturates_repeated_symbols(self, hydrogen):
        counter = Counter.parse(f"H{MAX_COUNT}H")
        assert counter.count(hydrogen) == MAX_COUNT

    def test_rejects_non_positive_counts(self, carbon):
        with pytest.raises(ValueError):
            Counter.from_pairs([(carbon, 0)])
        with pytest.raises(ValueError):
            Counter({carbon: -1})

    def test_merge(self, carbon, hydrogen):
        merged = Counter.parse("CH4") + Counter.parse("CO2")
        assert merged == Counter.parse("C2H4O2")
        assert merged.count(carbon) == 2
        assert merged.count(hydrogen) == 4

    def test_merge_saturates(self, hydrogen):
        big = Counter.from_pairs([(hydrogen, MAX_COUNT)])
        assert big.merge(Counter.parse("H2")).count(hydrogen) == MAX_COUNT


class TestCounterQueries:
    """Tests for counts, weight and structural identity."""

    def test_count_absent_species(self, lookup):
        assert Counter.parse("CH4").count(lookup.lookup("N")) == 0

    def test_element_count_includes_isotopes(self, hydrogen):
        counter = Counter.parse("CH3D")
        assert counter.count(hydrogen) == 3
        assert counter.element_count(1) == 4

    def test_weight_worked_example(self, carbon, hydrogen, oxygen):
        counter = Counter.parse("C2H5OH")
        expected = (
            carbon.relative_atomic_mass * 2
            + hydrogen.relative_atomic_mass * 6
            + oxygen.relative_atomic_mass
        )
        assert counter.weight() == pytest.approx(expected)
        assert counter.weight() == pytest.approx(46.07, abs=0.01)

    def test_weight_of_empty_counter(self):
        assert Counter().weight() == 0.0

    def test_isotopes_weigh_more(self):
        assert Counter.parse("D2O").weight() > Counter.parse("H2O").weight()

    def test_equality_and_hash(self):
        assert Counter.parse("C2H5OH") == Counter.parse("HOC2H5")
        assert hash(Counter.parse("C2H5OH")) == hash(Counter.parse("HOC2H5"))
        assert Counter.parse("CH4") != Counter.parse("CH3")

    def test_ordering(self):
        assert Counter.parse("H2") < Counter.parse("H3")
        assert sorted([Counter.parse("CH4"), Counter.parse("H2")])[0] == Counter.parse("H2")

    def test_mapping_interface(self, carbon, hydrogen):
        counter = Counter.parse("CH4")
        assert list(counter) == [hydrogen, carbon]
        assert counter[carbon] == 1
        assert carbon in counter
        assert dict(counter.items()) == {hydrogen: 4, carbon: 1}

    def test_dict_round_trip(self):
        counter = Counter.parse("C2H5OH")
        assert counter.to_dict() == {"H": 6, "C": 2, "O": 1}
        assert list(counter.to_dict()) == ["H", "C", "O"]
        assert Counter.from_dict(counter.to_dict()) == counter


class TestCounterSaturation:
    """Tests for the degree of unsaturation of formulas."""

    @pytest.mark.parametrize(
        "text,expected",
        [("C2H6", 0), ("C2H4", 1), ("C2H2", 2), ("C6H6", 4), ("C2H5OH", 0), ("H2O", 0), ("CH4", 0)],
    )
    def test_unsaturated(self, text, expected):
        assert Counter.parse(text).unsaturated() == expected

    def test_ethane_is_saturated(self):
        ethane = Counter.parse("C2H6")
        assert ethane.saturated()
        assert ethane.saturation() is Saturation.SATURATED

    def test_ethene_is_unsaturated(self):
        ethene = Counter.parse("C2H4")
        assert not ethene.saturated()
        assert ethene.saturation() is Saturation.UNSATURATED

    def test_excess_hydrogen_does_not_go_negative(self):
        assert Counter.parse("CH6").unsaturated() == 0
