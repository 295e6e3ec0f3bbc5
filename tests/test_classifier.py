"""Slide layout classification tests."""

import unittest

from mdslides.layout.classifier import classify, classify_slide
from mdslides.models.slide import ImageRef, LayoutKind, QuoteBlock


class TestClassifySlide(unittest.TestCase):
    def test_title_and_subtitle(self) -> None:
        result = classify_slide("# Title\n\n## Subtitle")
        self.assertEqual(result.layout, LayoutKind.TITLE_SUBTITLE)
        self.assertEqual(result.title, "Title")
        self.assertEqual(result.subtitle, "Subtitle")
        self.assertEqual(result.images, [])
        self.assertIsNone(result.quote)

    def test_title_only(self) -> None:
        result = classify_slide("# Title")
        self.assertEqual(result.layout, LayoutKind.TITLE_ONLY)
        self.assertIsNone(result.subtitle)

    def test_minor_headings_keep_title_only(self) -> None:
        self.assertEqual(classify("# Title\n\n### Small print"), LayoutKind.TITLE_ONLY)

    def test_single_image(self) -> None:
        result = classify_slide("# Title\n\n![alt](http://x/y.png)")
        self.assertEqual(result.layout, LayoutKind.SINGLE_IMAGE)
        self.assertEqual(result.images, [ImageRef(alt="alt", url="http://x/y.png")])

    def test_double_image(self) -> None:
        body = "![a](1.png)\n![b](2.png)"
        self.assertEqual(classify(body), LayoutKind.DOUBLE_IMAGE)

    def test_grid_images(self) -> None:
        for count in (3, 4, 7):
            body = "\n".join(f"![img {n}](img{n}.png)" for n in range(count))
            self.assertEqual(classify(body), LayoutKind.GRID_IMAGES)
            self.assertEqual(classify("# Gallery\n\n" + body), LayoutKind.GRID_IMAGES)

    def test_quote(self) -> None:
        result = classify_slide("> Quoted text\n> -- Author")
        self.assertEqual(result.layout, LayoutKind.QUOTE)
        self.assertEqual(result.quote, QuoteBlock(text="Quoted text", attribution="Author"))

    def test_quote_with_title(self) -> None:
        result = classify_slide("# Wisdom\n\n> Quoted text\n> -- Author")
        self.assertEqual(result.layout, LayoutKind.QUOTE)
        self.assertEqual(result.title, "Wisdom")

    def test_quote_with_image_is_standard(self) -> None:
        body = "# Title\n\n> Quoted text\n\n![alt](pic.png)"
        self.assertEqual(classify(body), LayoutKind.STANDARD)

    def test_attribution_only_quote_still_quote_layout(self) -> None:
        result = classify_slide("> -- Anonymous")
        self.assertEqual(result.layout, LayoutKind.QUOTE)
        self.assertIsNone(result.quote)

    def test_stray_image_marker_rules_out_quote(self) -> None:
        body = "> A quotation that is long enough to stand alone\n> see ![ below"
        self.assertEqual(classify(body), LayoutKind.STANDARD)

    def test_paragraph_is_standard(self) -> None:
        self.assertEqual(classify("# Title\n\nSome paragraph text."), LayoutKind.STANDARD)

    def test_title_subtitle_with_image_is_standard(self) -> None:
        body = "# Title\n\n## Subtitle\n\n![alt](pic.png)"
        self.assertEqual(classify(body), LayoutKind.STANDARD)

    def test_images_with_text_are_standard(self) -> None:
        body = "# Title\n\n![a](1.png)\n\nA caption paragraph."
        self.assertEqual(classify(body), LayoutKind.STANDARD)

    def test_no_heading_text_is_standard(self) -> None:
        self.assertEqual(classify("Just some text"), LayoutKind.STANDARD)
        self.assertEqual(classify("## Subtitle only"), LayoutKind.STANDARD)

    def test_empty_body_is_standard(self) -> None:
        result = classify_slide("")
        self.assertEqual(result.layout, LayoutKind.STANDARD)
        self.assertIsNone(result.title)
        self.assertEqual(result.images, [])

    def test_title_images_come_from_body(self) -> None:
        result = classify_slide("# Photos\n\n![a](1.png)\n![b](2.png)")
        self.assertEqual(result.layout, LayoutKind.DOUBLE_IMAGE)
        self.assertEqual([image.url for image in result.images], ["1.png", "2.png"])

    def test_classification_is_deterministic(self) -> None:
        body = "# T\n\n> q\n> -- a"
        self.assertEqual(classify_slide(body), classify_slide(body))


if __name__ == "__main__":
    unittest.main()
