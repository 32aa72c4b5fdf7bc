"""Shared ring test data for API tests."""

RING_IMAGE = (
    "https://r2.padrepauloricardo.org/uploads/aula/frame/1618/"
    "5-os-aneis-do-poder-slide-frame.jpg"
)
