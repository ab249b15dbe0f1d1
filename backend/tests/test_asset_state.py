import pytest

from domain.value_objects.asset_state import AssetState, state_name
from domain.value_objects.date_code import DateCode


class TestAssetState:
    @pytest.mark.parametrize("source,target", [
        (AssetState.ISSUED, AssetState.PENDING),
        (AssetState.ISSUED, AssetState.TRADING),
        (AssetState.PENDING, AssetState.ISSUED),
        (AssetState.PENDING, AssetState.TRADING),
        (AssetState.TRADING, AssetState.REDEEMED),
    ])
    def test_allowed_transitions(self, source, target):
        assert source.can_transition_to(target)

    @pytest.mark.parametrize("source,target", [
        (AssetState.ISSUED, AssetState.REDEEMED),
        (AssetState.ISSUED, AssetState.ISSUED),
        (AssetState.PENDING, AssetState.REDEEMED),
        (AssetState.TRADING, AssetState.ISSUED),
        (AssetState.TRADING, AssetState.PENDING),
    ])
    def test_forbidden_transitions(self, source, target):
        assert not source.can_transition_to(target)

    def test_redeemed_is_terminal(self):
        assert AssetState.REDEEMED.is_terminal()
        assert not any(AssetState.REDEEMED.can_transition_to(s) for s in AssetState)
        assert not AssetState.TRADING.is_terminal()

    def test_codes_start_at_one(self):
        assert [int(s) for s in AssetState] == [1, 2, 3, 4]

    def test_display_names(self):
        assert [state_name(code) for code in range(1, 5)] == [
            "ISSUED", "PENDING", "TRADING", "REDEEMED"
        ]
        assert str(AssetState.TRADING) == "TRADING"

    @pytest.mark.parametrize("code", [0, 5, -1, 99])
    def test_out_of_range_code_is_unknown(self, code):
        assert state_name(code) == "UNKNOWN"

    def test_from_name(self):
        assert AssetState.from_name("PENDING") is AssetState.PENDING
        with pytest.raises(ValueError, match="Invalid asset state"):
            AssetState.from_name("CLOSED")


class TestDateCode:
    def test_converts_to_date(self):
        code = DateCode(20230101)
        assert code.to_date().isoformat() == "2023-01-01"
        assert str(code) == "2023-01-01"

    @pytest.mark.parametrize("value", [2023011, 202301011, 20231301, 20230230])
    def test_rejects_invalid_codes(self, value):
        with pytest.raises(ValueError):
            DateCode(value)

    def test_ordering(self):
        assert DateCode(20230101) < DateCode(20240101)
        assert not DateCode(20230101) < DateCode(20230101)

    def test_ordering_against_plain_int(self):
        with pytest.raises(TypeError):
            DateCode(20230101) < 20240101
