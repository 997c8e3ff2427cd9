import pytest

from hotel_reservation.client.domain.value_object import ClientCode


class TestClientCode:
    def test_create_client_code(self):
        assert ClientCode(value=1).value == 1

    def test_str_returns_value(self):
        assert str(ClientCode(value=7)) == "7"

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_code_raises_error(self, value):
        with pytest.raises(ValueError):
            ClientCode(value=value)
