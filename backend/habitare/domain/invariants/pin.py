from .exceptions import PinSlugConflict


def assert_unique_pin_slugs(pins):
    seen = set()
    for pin in pins:
        if pin.slug in seen:
            raise PinSlugConflict(
                f'Dois pins geram o mesmo identificador "{pin.slug}". Renomeie um deles.'
            )
        seen.add(pin.slug)
