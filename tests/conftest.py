"""Shared test fixtures."""

import pytest

from ejbjar_parser.domain.constants import PUBLICID_EJB20


# ── Sample XML Content ───────────────────────────────────────────────────

ENTITY_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<ejb-jar>
  <enterprise-beans>
    <entity>
      <ejb-name>AccountEJB</ejb-name>
      <home>com.example.AccountHome</home>
      <ejb-class>com.example.AccountBean</ejb-class>
    </entity>
  </enterprise-beans>
</ejb-jar>
"""

RESERVED_REMOTE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<ejb-jar>
  <enterprise-beans>
    <entity>
      <ejb-name>AccountEJB</ejb-name>
      <home>com.example.AccountHome</home>
      <remote>java.rmi.Remote</remote>
      <ejb-class>com.example.AccountBean</ejb-class>
      <prim-key-class>java.lang.String</prim-key-class>
    </entity>
  </enterprise-beans>
</ejb-jar>
"""

EJB_REF_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<ejb-jar>
  <enterprise-beans>
    <entity>
      <ejb-name>AccountEJB</ejb-name>
      <home>com.example.AccountHome</home>
      <ejb-class>com.example.AccountBean</ejb-class>
      <ejb-ref>
        <ejb-ref-name>ejb/Other</ejb-ref-name>
        <ejb-ref-type>Entity</ejb-ref-type>
        <home>com.example.Other</home>
        <remote>com.example.OtherRemote</remote>
      </ejb-ref>
    </entity>
  </enterprise-beans>
</ejb-jar>
"""

MULTI_BEAN_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<ejb-jar>
  <description>Bank application</description>
  <enterprise-beans>
    <session>
      <ejb-name>TellerEJB</ejb-name>
      <home>com.example.bank.TellerHome</home>
      <remote>com.example.bank.Teller</remote>
      <local-home>com.example.bank.TellerLocalHome</local-home>
      <local>com.example.bank.TellerLocal</local>
      <ejb-class>com.example.bank.TellerBean</ejb-class>
      <session-type>Stateless</session-type>
    </session>
    <entity>
      <ejb-name>AccountEJB</ejb-name>
      <home>com.example.bank.AccountHome</home>
      <remote>com.example.bank.Account</remote>
      <ejb-class>com.example.bank.AccountBean</ejb-class>
      <prim-key-class>com.example.bank.AccountPK</prim-key-class>
    </entity>
    <message-driven>
      <ejb-name>AuditEJB</ejb-name>
      <ejb-class>com.example.bank.AuditBean</ejb-class>
    </message-driven>
  </enterprise-beans>
  <assembly-descriptor>
    <container-transaction>
      <method>
        <ejb-name>TellerEJB</ejb-name>
        <method-name>*</method-name>
      </method>
      <trans-attribute>Required</trans-attribute>
    </container-transaction>
  </assembly-descriptor>
</ejb-jar>
"""

EJB20_DOCTYPE_XML = f"""\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE ejb-jar PUBLIC "{PUBLICID_EJB20}" "http://java.sun.com/dtd/ejb-jar_2_0.dtd">
<ejb-jar>
  <enterprise-beans>
    <session>
      <ejb-name>TellerEJB</ejb-name>
      <home>com.example.bank.TellerHome</home>
      <ejb-class>com.example.bank.TellerBean</ejb-class>
    </session>
  </enterprise-beans>
</ejb-jar>
"""

MISPLACED_BEAN_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<ejb-jar>
  <session>
    <ejb-name>LooseEJB</ejb-name>
    <ejb-class>com.example.LooseBean</ejb-class>
  </session>
</ejb-jar>
"""

UNRELATED_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<web-app>
  <servlet>
    <servlet-name>hello</servlet-name>
    <servlet-class>com.example.HelloServlet</servlet-class>
  </servlet>
  <session>
    <ejb-class>com.example.NotABean</ejb-class>
  </session>
</web-app>
"""

MINIMAL_DTD = """\
<!ELEMENT ejb-jar (enterprise-beans)>
<!ELEMENT enterprise-beans (session | entity | message-driven)+>
"""


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def tmp_xml(tmp_path):
    """Write XML content to a temp file and return its path."""
    def _write(content: str, filename: str = "ejb-jar.xml") -> str:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def dtd_file(tmp_path):
    """A local DTD file."""
    path = tmp_path / "local-ejb-jar.dtd"
    path.write_text(MINIMAL_DTD, encoding="utf-8")
    return str(path)


class FakeResponse:
    """Stand-in for ``requests.Response``."""

    def __init__(self, content: bytes = b'', status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def fake_get(monkeypatch):
    """Patch ``requests.get``; records requested URLs."""
    import requests

    calls: list[str] = []
    state = {'response': FakeResponse(MINIMAL_DTD.encode('utf-8')), 'error': None}

    def _get(url, timeout=None):
        calls.append(url)
        if state['error'] is not None:
            raise state['error']
        return state['response']

    monkeypatch.setattr(requests, 'get', _get)
    _get.calls = calls
    _get.state = state
    return _get
