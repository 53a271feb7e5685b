import pytest

TTML_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<tt:tt xmlns:tt="http://www.w3.org/ns/ttml"
       xmlns:tts="http://www.w3.org/ns/ttml#styling"
       xmlns:ttp="http://www.w3.org/ns/ttml#parameter"
       xmlns:ebuttm="{metadata_namespace}"
       ttp:timeBase="media" xml:lang="de">
  <tt:head>
    <tt:metadata>
      <ebuttm:documentMetadata>
        {version}
      </ebuttm:documentMetadata>
    </tt:metadata>
    <tt:styling>
      {styles}
    </tt:styling>
  </tt:head>
  <tt:body>
    <tt:div>
      {cues}
    </tt:div>
  </tt:body>
</tt:tt>
"""

DEFAULT_STYLES = """
      <tt:style xml:id="textWhite" tts:color="#FFFFFF" tts:backgroundColor="#000000"/>
      <tt:style xml:id="textRed" tts:color="#FF0000"/>
"""


def make_ttml(cues="", styles=DEFAULT_STYLES, version="v1.0", metadata_namespace="urn:ebu:tt:metadata"):
    if version is None:
        version_element = ""
    else:
        version_element = f"<ebuttm:documentEbuttVersion>{version}</ebuttm:documentEbuttVersion>"
    return TTML_TEMPLATE.format(version=version_element, styles=styles, cues=cues,
                               metadata_namespace=metadata_namespace).encode("utf-8")


class RecordingReporter:
    def __init__(self):
        self.reports = []

    def report(self, code, cause, context):
        self.reports.append((code, cause, context))


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def write_ttml(tmp_path):
    def _write(name="input.ttml", **kwargs):
        path = tmp_path / name
        path.write_bytes(make_ttml(**kwargs))
        return path
    return _write


# Header and first cues as broadcast by a public broadcaster (EBU Tech 3350 v1.0)
BROADCAST_V1_0 = """<?xml version="1.0" encoding="UTF-8"?>
<tt:tt xmlns:tt="http://www.w3.org/ns/ttml" xmlns:tts="http://www.w3.org/ns/ttml#styling"
       xmlns:ttp="http://www.w3.org/ns/ttml#parameter" xmlns:ebuttm="urn:ebu:metadata"
       xmlns:ebutts="urn:ebu:style" ttp:timeBase="media" ttp:cellResolution="50 30" xml:lang="de">
  <tt:head>
    <tt:metadata>
      <ebuttm:documentMetadata>
        <ebuttm:documentEbuttVersion>v1.0</ebuttm:documentEbuttVersion>
        <ebuttm:documentTotalNumberOfSubtitles>2</ebuttm:documentTotalNumberOfSubtitles>
        <ebuttm:documentMaximumNumberOfDisplayableCharacterInAnyRow>40</ebuttm:documentMaximumNumberOfDisplayableCharacterInAnyRow>
        <ebuttm:documentStartOfProgramme>10:00:00:00</ebuttm:documentStartOfProgramme>
        <ebuttm:documentCountryOfOrigin>de</ebuttm:documentCountryOfOrigin>
        <ebuttm:documentPublisher>ARD</ebuttm:documentPublisher>
      </ebuttm:documentMetadata>
    </tt:metadata>
    <tt:styling>
      <tt:style xml:id="defaultStyle" tts:fontFamily="Verdana,Arial,Tiresias" tts:fontSize="160%" tts:lineHeight="125%"/>
      <tt:style xml:id="textWhite" tts:color="#ffffff" tts:backgroundColor="#000000c2"/>
      <tt:style xml:id="textYellow" tts:color="#ffff00" tts:backgroundColor="#000000c2"/>
    </tt:styling>
    <tt:layout>
      <tt:region xml:id="bottom" tts:origin="10% 10%" tts:extent="80% 80%" tts:displayAlign="after" tts:textAlign="center"/>
    </tt:layout>
  </tt:head>
  <tt:body>
    <tt:div>
      <tt:p xml:id="sub0" region="bottom" begin="10:00:04.24" end="10:00:07.20">
        <tt:span style="textWhite">Guten Abend,</tt:span>
        <tt:br/>
        <tt:span style="textYellow">meine Damen und Herren.</tt:span>
      </tt:p>
      <tt:p xml:id="sub1" region="bottom" begin="10:00:07.32" end="10:00:09.80">
        <tt:span style="textWhite">Willkommen zur Tagesschau.</tt:span>
      </tt:p>
    </tt:div>
  </tt:body>
</tt:tt>
""".encode("utf-8")


@pytest.fixture
def broadcast_ttml(tmp_path):
    path = tmp_path / "broadcast.ttml"
    path.write_bytes(BROADCAST_V1_0)
    return path
