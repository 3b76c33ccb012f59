from monzo_openapi.generator.skeleton import build_skeleton
from monzo_openapi.generator.supplemental import MISSING_ENDPOINTS, inject_missing
from monzo_openapi.parser.base import Operation


class TestBuildSkeleton:
    def test_empty_but_valid(self):
        doc = build_skeleton()
        assert doc.openapi == "3.1.0"
        assert doc.paths == {}
        assert doc.tags == []
        assert doc.servers[0]["url"] == "https://api.monzo.com"
        assert {"title", "version", "description"} <= set(doc.info)

    def test_security_schemes(self):
        schemes = build_skeleton().security_schemes
        assert list(schemes) == ["bearerAuth", "openBankingAuth"]
        assert schemes["bearerAuth"]["type"] == "http"
        assert schemes["bearerAuth"]["scheme"] == "bearer"
        assert schemes["openBankingAuth"]["type"] == "oauth2"
        flow = schemes["openBankingAuth"]["flows"]["authorizationCode"]
        assert flow["authorizationUrl"].startswith("https://")
        assert flow["tokenUrl"].startswith("https://")


class TestInjectMissing:
    def test_adds_every_listed_endpoint(self):
        doc = inject_missing(build_skeleton())
        for method, path, tag, summary in MISSING_ENDPOINTS:
            op = doc.paths[path][method.lower()]
            assert op.tags == [tag]
            assert op.summary == summary
        assert doc.paths["/ping/whoami"]["get"].operation_id == "getPingWhoami"

    def test_adds_tags_for_new_groups(self):
        doc = inject_missing(build_skeleton())
        names = [t.name for t in doc.tags]
        assert names == ["Authentication", "Attachments", "Webhooks", "Open Banking"]

    def test_path_parameters_and_security(self):
        doc = inject_missing(build_skeleton())
        delete = doc.paths["/webhooks/{webhook_id}"]["delete"]
        assert [(p.name, p.location, p.required) for p in delete.parameters] == [("webhook_id", "path", True)]
        assert delete.security == [{"bearerAuth": []}]
        assert doc.paths["/open-banking/accounts"]["get"].security == [{"openBankingAuth": []}]

    def test_never_overwrites_existing(self):
        doc = build_skeleton()
        documented = Operation(
            operation_id="getPingWhoami",
            summary="Documented whoami",
            tags=["Authentication"],
            responses={"200": {"description": "OK"}},
            security=[{"bearerAuth": []}],
        )
        doc.add_operation("/ping/whoami", "get", documented)
        inject_missing(doc)
        assert doc.paths["/ping/whoami"]["get"].summary == "Documented whoami"
        assert list(doc.paths).count("/ping/whoami") == 1
