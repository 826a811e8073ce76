#
# siprefix - Prefix Table Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from siprefix.prefixes import PrefixConf, SI_PREFIXES, MAX_EXPONENT, MIN_EXPONENT
from siprefix.prefixes import prefix_exponent, prefix_symbol, valid_exponents, valid_prefixes


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPrefixTable:
    """Tests for the static table itself."""

    def test_table_shape(self):
        assert len(SI_PREFIXES) == 17
        assert valid_exponents == tuple(range(-24, 25, 3))
        assert (MIN_EXPONENT, MAX_EXPONENT) == (-24, 24)

    def test_symbols_in_order(self):
        assert "".join(SI_PREFIXES.values()) == "yzafpnµmkMGTPEZY"
        assert "" not in valid_prefixes
        assert len(valid_prefixes) == 16

    def test_conf_is_shared(self):
        assert PrefixConf.SI_PREFIXES is SI_PREFIXES


class TestPrefixSymbol:

    @pytest.mark.parametrize('exp, expected', [
        pytest.param(-24, "y", id='yocto'),
        pytest.param(-6, "µ", id='micro'),
        pytest.param(-3, "m", id='milli'),
        pytest.param(0, "", id='none'),
        pytest.param(3, "k", id='kilo'),
        pytest.param(6, "M", id='mega'),
        pytest.param(24, "Y", id='yotta'),
    ])
    def test_lookup(self, exp, expected):
        assert prefix_symbol(exp) == expected

    @pytest.mark.parametrize('exp', [
        pytest.param(1, id='not_multiple_of_3'),
        pytest.param(27, id='above_range'),
        pytest.param(-27, id='below_range'),
    ])
    def test_invalid_exponent(self, exp):
        with pytest.raises(ValueError, match="Invalid exponent"):
            prefix_symbol(exp)

    @pytest.mark.parametrize('exp', [
        pytest.param(3.0, id='float'),
        pytest.param("k", id='str'),
        pytest.param(True, id='bool'),
    ])
    def test_invalid_type(self, exp):
        with pytest.raises(TypeError, match="exponent must be an int"):
            prefix_symbol(exp)


class TestPrefixExponent:

    @pytest.mark.parametrize('symbol, expected', [
        pytest.param("k", 3, id='kilo'),
        pytest.param("K", 3, id='kilo_upper'),
        pytest.param("m", -3, id='milli'),
        pytest.param("M", 6, id='mega_exact_case_wins'),
        pytest.param("p", -12, id='pico'),
        pytest.param("P", 15, id='peta'),
        pytest.param("g", 9, id='giga_lower'),
        pytest.param("µ", -6, id='micro_sign'),
        pytest.param("μ", -6, id='greek_mu'),
        pytest.param("u", -6, id='ascii_u'),
        pytest.param("U", -6, id='ascii_u_upper'),
    ])
    def test_lookup(self, symbol, expected):
        assert prefix_exponent(symbol) == expected

    @pytest.mark.parametrize('symbol', [
        pytest.param("", id='empty'),
        pytest.param("W", id='unit_letter'),
        pytest.param("%", id='percent'),
        pytest.param("kW", id='two_chars'),
        pytest.param("da", id='deca_not_supported'),
        pytest.param("Ki", id='binary_not_supported'),
    ])
    def test_not_a_prefix(self, symbol):
        assert prefix_exponent(symbol) is None

    def test_invalid_type(self):
        with pytest.raises(TypeError, match="prefix symbol must be a str"):
            prefix_exponent(3)

    def test_round_trip_all(self):
        """Every symbol resolves back to its exponent."""
        for exp in valid_exponents:
            symbol = prefix_symbol(exp)
            if symbol:
                assert prefix_exponent(symbol) == exp
