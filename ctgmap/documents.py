"""Reading and writing task, core and mapping graph (APCG) XML documents.

Task documents describe one task of a CTG::

    <task>
      <ID>0</ID>
      <type>3</type>
    </task>

Core documents describe one core type of the core library::

    <core>
      <ID>12</ID>
      <name>AMD K6-2E 400MHz</name>
      <task>
        <type>3</type>
        <execTime>1.2e-05</execTime>
        <power>1.3</power>
      </task>
    </core>

Mapping graph documents hold a complete mapping of a CTG::

    <apcg id="0_1" ctg="0">
      <core uid="0" id="12">
        <task id="0" execTime="1.2e-05" power="1.3"/>
      </core>
    </apcg>
"""

import io
import os

import xml.etree.ElementTree as ET

from ctgmap.exceptions import DocumentError

from ctgmap.model import \
    Task, Core, Profile, MappingGraph, CoreInstance, TaskInstance


def _parse(filename):
    try:
        return ET.parse(filename).getroot()
    except ET.ParseError as e:
        raise DocumentError(str(e), filename)


def _expect_root(root, tag, filename):
    if root.tag != tag:
        raise DocumentError(
            "expected <{}> document, got <{}>".format(tag, root.tag), filename)


def _text(element, tag, filename):
    child = element.find(tag)
    if child is None or child.text is None:
        raise DocumentError(
            "missing <{}> in <{}>".format(tag, element.tag), filename)
    return child.text.strip()


def _attrib(element, name, filename):
    try:
        return element.attrib[name]
    except KeyError:
        raise DocumentError(
            "missing attribute '{}' on <{}>".format(name, element.tag),
            filename)


def _float(value, filename):
    try:
        return float(value)
    except ValueError:
        raise DocumentError("invalid number {!r}".format(value), filename)


def read_task(filename):
    """Read a :py:class:`~ctgmap.model.Task` from a task document."""
    root = _parse(filename)
    _expect_root(root, "task", filename)
    return Task(_text(root, "ID", filename), _text(root, "type", filename))


def read_core(filename):
    """Read a :py:class:`~ctgmap.model.Core` from a core document.

    Profiles keep the order of the ``<task>`` elements.
    """
    root = _parse(filename)
    _expect_root(root, "core", filename)

    profiles = [Profile(_text(task, "type", filename),
                        _float(_text(task, "execTime", filename), filename),
                        _float(_text(task, "power", filename), filename))
                for task in root.findall("task")]

    name = root.find("name")
    return Core(_text(root, "ID", filename),
                name.text.strip() if name is not None and name.text else "",
                profiles)


def read_mapping_graph(filename):
    """Read a :py:class:`~ctgmap.model.MappingGraph` from an APCG document.
    """
    root = _parse(filename)
    _expect_root(root, "apcg", filename)

    cores = []
    for core in root.findall("core"):
        tasks = [TaskInstance(
                    _attrib(task, "id", filename),
                    _float(_attrib(task, "execTime", filename), filename),
                    _float(_attrib(task, "power", filename), filename))
                 for task in core.findall("task")]
        cores.append(CoreInstance(_attrib(core, "id", filename),
                                  _attrib(core, "uid", filename),
                                  tasks))

    return MappingGraph(_attrib(root, "id", filename),
                        _attrib(root, "ctg", filename),
                        cores)


def mapping_graph_to_xml(mapping_graph):
    """Produce the APCG document of a mapping graph as a string.

    Numbers are written using :py:func:`repr` so that reading the document
    back produces an identical mapping graph.
    """
    root = ET.Element("apcg", id=mapping_graph.id, ctg=mapping_graph.ctg_id)
    for core in mapping_graph.cores:
        core_element = ET.SubElement(root, "core", uid=core.uid,
                                     id=core.core_id)
        for task in core.tasks:
            ET.SubElement(core_element, "task",
                          id=task.task_id,
                          execTime=repr(float(task.exec_time)),
                          power=repr(float(task.power)))

    _indent(root)
    return ET.tostring(root, encoding="unicode")


def _indent(element, level=0):
    """Pretty-print an element tree in place."""
    whitespace = "\n" + "  " * level
    if len(element):
        element.text = whitespace + "  "
        for child in element:
            _indent(child, level + 1)
        child.tail = whitespace
    if level > 0:
        element.tail = whitespace


def write_mapping_graph(mapping_graph, filename):
    """Write an APCG document to a UTF-8 encoded file.

    The document is produced in full before the file is opened.
    """
    document = ('<?xml version="1.0" encoding="UTF-8"?>\n' +
                mapping_graph_to_xml(mapping_graph) + "\n")

    with io.open(filename, "w", encoding="utf-8") as f:
        f.write(document)


def xml_files(directory):
    """List the XML files in a directory, sorted by file name."""
    return [os.path.join(directory, filename)
            for filename in sorted(os.listdir(directory))
            if filename.endswith(".xml")]


def load_tasks(directory):
    """Read every task document in a directory (in file name order)."""
    return [read_task(filename) for filename in xml_files(directory)]


def load_cores(directory):
    """Read every core document in a directory (in file name order)."""
    return [read_core(filename) for filename in xml_files(directory)]
