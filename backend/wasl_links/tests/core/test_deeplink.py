from wasl_links.core.deeplink import RedirectTarget, compose
from wasl_links.core.platform_detection import Platform


class TestCompose:
    def test_android_intent_uri(self, app_config):
        """Android gets an intent URI with the request path embedded verbatim"""
        target = compose(Platform.ANDROID, "/store/abc", app_config)

        assert target.deep_link == "intent:///store/abc#Intent;scheme=wasl;package=com.mhmd.wasl;end"
        assert not target.renders_landing_page

    def test_android_uses_configured_package(self, app_config):
        cfg = app_config.model_copy(update={"android_package": "com.example.other"})

        target = compose(Platform.ANDROID, "/item/1", cfg)

        assert target.deep_link == "intent:///item/1#Intent;scheme=wasl;package=com.example.other;end"

    def test_ios_scheme_uri(self, app_config):
        target = compose(Platform.IOS, "/item/42", app_config)

        assert target.deep_link == "wasl:///item/42"

    def test_other_renders_landing_page(self, app_config):
        target = compose(Platform.OTHER, "/combo/x", app_config)

        assert target == RedirectTarget.landing_page()
        assert target.renders_landing_page
        assert target.deep_link is None

    def test_path_is_not_escaped(self, app_config):
        """Reserved characters pass through untouched"""
        target = compose(Platform.IOS, "/store/a b?c#d", app_config)

        assert target.deep_link == "wasl:///store/a b?c#d"
