"""Factory for creating safe XML parsers with lxml."""

from lxml import etree


def make_xml_parser(
    *,
    recover: bool = False,
    remove_blank_text: bool = True,
    resolve_entities: bool = False,
    load_dtd: bool = False,
    no_network: bool = True,
    encoding: str | None = "utf-8",
    huge_tree: bool = True,
) -> etree.XMLParser:
    """
    Create an XML parser for dupFinder logs.

    Safety:
    - no_network=True: blocks network access
    - resolve_entities=False: XXE protection
    - load_dtd=False: DTDs are never loaded

    Strictness:
    - recover=False: a log that is not well-formed is rejected as a whole
    - encoding overrides the encoding declared in the prolog, the caller always
      hands over UTF-8 bytes
    - huge_tree=True: logs of large solutions exceed libxml2's default limits
    """
    return etree.XMLParser(
        recover=recover,
        remove_blank_text=remove_blank_text,
        resolve_entities=resolve_entities,
        load_dtd=load_dtd,
        no_network=no_network,
        encoding=encoding,
        huge_tree=huge_tree,
    )
