import os
import shutil
import tempfile
import unittest
from unittest import mock

import config as cfg
from scripts import generate


class GenerateTest(unittest.TestCase):
    def setUp(self):
        self.doc_root = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.doc_root)

    def test_up_or_title(self):
        self.assertEqual(generate.up_or_title("node"), "Node")
        self.assertEqual(generate.up_or_title("subgraph"), "Subgraph and Cluster")

    def test_gen_apidoc(self):
        doc = generate.gen_apidoc("node")
        self.assertIn("## Node", doc)
        self.assertIn("| `label` | `label` | str |", doc)
        self.assertIn("| `fill_color` | `fillcolor` | Color, ColorList |", doc)
        self.assertIn("FixedSize (`false`, `true`, `shape`)", doc)

    def test_gen_apidoc_lists_every_slot(self):
        doc = generate.gen_apidoc("graph")
        for name in ("`ratio`", "`nodesep`", "`sortv`", "`clusterrank`", "`pagedir`", "`K`"):
            self.assertIn(name, doc)

    def test_generate(self):
        with mock.patch.object(generate, "doc_root_dir", return_value=self.doc_root):
            generate.generate()
        with open(os.path.join(self.doc_root, cfg.FILE_APIDOC)) as f:
            content = f.read()
        for heading in ("## Graph", "## Subgraph and Cluster", "## Node", "## Edge"):
            self.assertIn(heading, content)
