import pytest

from laundry_site.app.core.config import DEFAULT_PUBLIC_DIR
from laundry_site.app.schemas.booking import BookingForm
from laundry_site.app.schemas.catalog import ButtonAction, ServiceItem
from laundry_site.app.services.cart_controller import DUPLICATE_ALERT, CartController
from laundry_site.app.services.catalog_service import ServiceCatalog
from laundry_site.app.services.message_board import MessageBoard

VALID_FORM = BookingForm(full_name="Asha Rao", email="asha@example.com", phone="9876543210")


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(clock: FakeClock) -> CartController:
    catalog = ServiceCatalog(
        [
            ServiceItem(service_id="wash-fold", name="Wash & Fold", price=150),
            ServiceItem(service_id="ironing", name="Ironing", price=80),
            ServiceItem(service_id="steam", name="Steam Press", price=99.5),
        ]
    )
    return CartController(catalog, messages=MessageBoard(timeout=5, clock=clock))


def test_buttons_start_as_add(controller: CartController) -> None:
    assert {button.label for button in controller.buttons.values()} == {"Add Item"}
    assert controller.view().is_empty


def test_add_flips_button_to_remove(controller: CartController) -> None:
    assert controller.add_to_cart("ironing", "Ironing", 80)
    button = controller.buttons["ironing"]
    assert button.action is ButtonAction.REMOVE
    assert button.label == "Remove Item"
    assert button.css_class == "service-btn remove-btn"
    assert controller.view().total_label == "₹ 80.00"


def test_duplicate_add_alerts_and_changes_nothing(controller: CartController) -> None:
    controller.add_to_cart("ironing", "Ironing", 80)
    assert not controller.add_to_cart("ironing", "Ironing", 80)
    assert controller.alerts == [DUPLICATE_ALERT]
    assert len(controller.cart) == 1
    assert controller.view().total == 80


def test_remove_retains_values_for_next_add(controller: CartController) -> None:
    controller.add_to_cart("ironing", "Ironing (express)", 95)
    controller.remove_from_cart("ironing")
    button = controller.buttons["ironing"]
    assert button.action is ButtonAction.ADD
    assert (button.name, button.price) == ("Ironing (express)", 95)

    controller.click("ironing")
    assert controller.cart.get("ironing").name == "Ironing (express)"


def test_click_toggles(controller: CartController) -> None:
    controller.click("wash-fold")
    assert "wash-fold" in controller.cart
    controller.click("wash-fold")
    assert "wash-fold" not in controller.cart


def test_click_unknown_service(controller: CartController) -> None:
    with pytest.raises(KeyError):
        controller.click("unknown")


def test_empty_cart_submission_always_shows_cart_error(controller: CartController) -> None:
    for form in (BookingForm(), VALID_FORM):
        result = controller.submit_booking(form)
        assert result.error == "error-msg"
        assert controller.messages.visible() == ["error-msg"]


def test_invalid_submission_shows_one_error_and_keeps_state(controller: CartController) -> None:
    controller.click("wash-fold")
    controller.submit_booking(BookingForm(full_name="Asha"))
    assert controller.messages.visible() == ["error-email"]

    result = controller.submit_booking(VALID_FORM.model_copy(update={"email": "a@b"}))
    assert result.error == "error-email-invalid"
    assert controller.messages.visible() == ["error-email-invalid"]
    assert "wash-fold" in controller.cart
    assert controller.form.email == "a@b"


def test_successful_submission_resets_everything(controller: CartController, clock: FakeClock) -> None:
    controller.click("wash-fold")
    controller.click("steam")
    result = controller.submit_booking(VALID_FORM)

    assert result.ok
    assert result.submission.services_list == "Wash & Fold - ₹150, Steam Press - ₹99.5"
    assert result.submission.total == 249.5
    assert controller.cart.is_empty
    assert controller.view().is_empty
    assert controller.form == BookingForm()
    assert all(button.label == "Add Item" for button in controller.buttons.values())
    assert controller.messages.visible() == ["success-msg"]

    clock.now += 5
    assert controller.messages.visible() == []


def test_reset_prices_are_whole_numbers(controller: CartController) -> None:
    controller.click("steam")
    controller.submit_booking(VALID_FORM)
    assert controller.buttons["steam"].price == 99

    controller.click("steam")
    assert controller.cart.get("steam").price == 99


def test_reset_flips_services_outside_the_catalog(controller: CartController) -> None:
    controller.add_to_cart("gift-card", "Gift Card", 500)
    controller.submit_booking(VALID_FORM)
    button = controller.buttons["gift-card"]
    assert button.action is ButtonAction.ADD
    assert button.price == 500


def test_from_bundled_services_page() -> None:
    controller = CartController.from_services_page(DEFAULT_PUBLIC_DIR / "services.html")
    service_id = next(iter(controller.buttons))
    controller.click(service_id)
    assert controller.submit_booking(VALID_FORM).ok
    assert all(button.label == "Add Item" for button in controller.buttons.values())
