from wasl_links.core.landing_page import render_landing_page

ANDROID_STORE_URL = "https://play.google.com/store/apps/details?id=com.mhmd.wasl"
IOS_STORE_URL = "https://apps.apple.com/app/1234567890"


class TestRenderLandingPage:
    def test_store_links_present(self):
        """Both store buttons link to the configured listings"""
        html = render_landing_page("/combo/x", ANDROID_STORE_URL, IOS_STORE_URL)

        assert f'href="{ANDROID_STORE_URL}"' in html
        assert f'href="{IOS_STORE_URL}"' in html
        assert html.lstrip().startswith("<!DOCTYPE html>")

    def test_arabic_by_default(self):
        html = render_landing_page("/store/1", ANDROID_STORE_URL, IOS_STORE_URL)

        assert 'dir="rtl"' in html
        assert "تحميل من Google Play" in html
        assert "<h1>وصل</h1>" in html

    def test_english(self):
        html = render_landing_page("/store/1", ANDROID_STORE_URL, IOS_STORE_URL, language="en")

        assert 'dir="ltr"' in html
        assert "Get it on Google Play" in html
        assert "<title>Wasl - Open the app</title>" in html

    def test_unsupported_language_uses_default(self):
        html = render_landing_page("/store/1", ANDROID_STORE_URL, IOS_STORE_URL, language="xx")

        assert 'lang="ar"' in html

    def test_path_is_escaped(self):
        """The request path is untrusted and must not inject markup"""
        html = render_landing_page('/item/"><script>alert(1)</script>', ANDROID_STORE_URL, IOS_STORE_URL)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_deterministic(self):
        first = render_landing_page("/item/9", ANDROID_STORE_URL, IOS_STORE_URL, language="en")
        second = render_landing_page("/item/9", ANDROID_STORE_URL, IOS_STORE_URL, language="en")

        assert first == second
