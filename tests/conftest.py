from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from prelude_native.constants import EnvVars

CANONICAL_SUBJECT_XML = """\
<export_from_vision_EDC date="30-May-2024 10:35 -0500" createdBy="Paul Sanders" role="Project Manager" numberSubjectsProcessed="4">
    <patient patientId="ABC-001" uniqueId="1681574905819" whenCreated="2023-04-15 12:09:02 -0400" creator="Paul Sanders" siteName="Some Site" siteUniqueId="1681574834910" lastLanguage="English" numberOfForms="6">
      <form name="day.0.form.name.demographics" lastModified="2023-04-15 12:09:15 -0400" whoLastModifiedName="Paul Sanders" whoLastModifiedRole="Project Manager" whenCreated="1681574905839" hasErrors="false" hasWarnings="false" locked="false" user="" dateTimeChanged="" formTitle="Demographics" formIndex="1" formGroup="Day 0" formState="In-Work">
        <state value="form.state.in.work" signer="Paul Sanders - Project Manager" signerUniqueId="1681162687395" dateSigned="2023-04-15 12:09:02 -0400"/>
        <category name="Demographics" type="normal" highestIndex="0">
          <field name="breed" type="combo-box" dataType="string" errorCode="valid" whenCreated="2023-04-15 12:08:26 -0400" keepHistory="true">
            <entry id="1">
              <value by="Paul Sanders" byUniqueId="1681162687395" role="Project Manager" when="2023-04-15 12:09:02 -0400" xml:space="preserve">Labrador</value>
            </entry>
          </field>
        </category>
      </form>
    </patient>
    <patient patientId="DEF-002" uniqueId="1681574905820" whenCreated="2023-04-16 12:10:02 -0400" creator="Wade Watts" siteName="Another Site" siteUniqueId="1681574834911" lastLanguage="" numberOfForms="8">
      <form name="day.0.form.name.demographics" lastModified="2023-04-16 12:10:15 -0400" whoLastModifiedName="Barney Rubble" whoLastModifiedRole="Technician" whenCreated="1681574905838" hasErrors="false" hasWarnings="false" locked="false" user="" dateTimeChanged="" formTitle="Demographics" formIndex="1" formGroup="Day 0" formState="In-Work">
        <state value="form.state.in.work" signer="Paul Sanders - Project Manager" signerUniqueId="1681162687395" dateSigned="2023-04-16 12:10:02 -0400"/>
        <category name="Demographics" type="normal" highestIndex="0">
          <field name="breed" type="combo-box" dataType="string" errorCode="valid" whenCreated="2023-04-15 12:08:26 -0400" keepHistory="true">
            <entry id="1">
              <value by="Paul Sanders" byUniqueId="1681162687395" role="Project Manager" when="2023-04-15 12:09:02 -0400" xml:space="preserve">Labrador</value>
            </entry>
          </field>
        </category>
      </form>
    </patient>
</export_from_vision_EDC>
"""

SITE_XML = """\
<export_from_vision_EDC date="01-Jun-2024 18:17 -0500" createdBy="Paul Sanders" role="Project Manager" numberSubjectsProcessed="2">
  <site name="Some Site" uniqueId="1681574834910" numberOfPatients="4" countOfRandomizedPatients="0" whenCreated="2023-04-15 12:08:19 -0400" creator="Paul Sanders" numberOfForms="1">
    <form name="demographic.form.name.site.demographics" lastModified="2023-04-15 12:10:01 -0400" whoLastModifiedName="Paul Sanders" whoLastModifiedRole="Project Manager" whenCreated="1681575000000" hasErrors="false" hasWarnings="false" locked="false" user="" dateTimeChanged="" formTitle="Site Demographics" formIndex="1" formGroup="" formState="In-Work">
      <state value="form.state.in.work" signer="Paul Sanders - Project Manager" signerUniqueId="1681162687395" dateSigned="2023-04-15 12:10:01 -0400"/>
      <category name="Demographics" type="normal" highestIndex="0">
        <field name="address" type="text" dataType="string" errorCode="valid" whenCreated="2023-04-15 12:08:19 -0400" keepHistory="true">
          <entry id="1">
            <value by="Paul Sanders" byUniqueId="1681162687395" role="Project Manager" when="2023-04-15 12:09:40 -0400">1234 Main St</value>
          </entry>
        </field>
      </category>
    </form>
  </site>
  <site name="Another Site" uniqueId="1681574834911" numberOfPatients="0" countOfRandomizedPatients="0" whenCreated="2023-04-16 09:00:00 -0400" creator="Wade Watts" numberOfForms="0"/>
</export_from_vision_EDC>
"""

USER_XML = """\
<export_from_vision_EDC date="01-Jun-2024 18:25 -0500" createdBy="Paul Sanders" role="Project Manager">
  <user uniqueId="1691421275437" lastLanguage="" creator="Paul Sanders(1681162687395)" numberOfForms="1">
    <form name="form.name.demographics" lastModified="2023-08-07 15:15:41 -0400" whoLastModifiedName="Paul Sanders" whoLastModifiedRole="Project Manager" whenCreated="1691421341578" hasErrors="false" hasWarnings="false" locked="false" user="" dateTimeChanged="" formTitle="User Demographics" formIndex="1" formGroup="" formState="In-Work">
      <category name="demographics" type="normal" highestIndex="0">
        <field name="email" type="text" dataType="string" errorCode="undefined" whenCreated="2023-08-07 15:14:21 -0400" keepHistory="true">
          <entry id="1">
            <value by="Paul Sanders" byUniqueId="1681162687395" role="Project Manager" when="2023-08-07 15:15:41 -0400">jazz@artemis.com</value>
          </entry>
        </field>
      </category>
    </form>
  </user>
</export_from_vision_EDC>
"""


@pytest.fixture(autouse=True)
def _isolated_parser_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of the default config."""
    for name in (
        EnvVars.CHUNK_SIZE,
        EnvVars.STRICT_OPTIONAL_DATETIMES,
        EnvVars.REPORT_UNKNOWN_ELEMENTS,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def canonical_subject_xml() -> str:
    return CANONICAL_SUBJECT_XML


@pytest.fixture
def site_xml() -> str:
    return SITE_XML


@pytest.fixture
def user_xml() -> str:
    return USER_XML


@pytest.fixture
def subject_export() -> Callable[[str], str]:
    """Wrap patient markup in the export root element."""

    def _wrap(body: str) -> str:
        return f"<export_from_vision_EDC>{body}</export_from_vision_EDC>"

    return _wrap


@pytest.fixture
def write_xml(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "export.xml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
