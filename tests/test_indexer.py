import os
import shutil
import tempfile
import unittest

from wordcore.indexer import count_keywords, index_documents, load_keywords, make_index
from wordcore.ranking import is_ranked
from wordcore.searcher import top5_search
from wordcore.store import Occurrence

NOISE = frozenset({"the", "a", "is", "and", "of"})


class TestCountKeywords(unittest.TestCase):
    def test_counts_per_document(self):
        lines = [
            "The bus is late. The BUS,",
            "and a car; bus!",
            "end.of 3.0 car",
        ]
        kws = count_keywords("doc.txt", lines, NOISE)
        self.assertEqual(kws, {
            "bus": Occurrence("doc.txt", 3),
            "late": Occurrence("doc.txt", 1),
            "car": Occurrence("doc.txt", 2),
        })

    def test_empty_document(self):
        self.assertEqual(count_keywords("empty.txt", [], NOISE), {})
        self.assertEqual(count_keywords("blank.txt", ["", "   "], NOISE), {})


class TestIndexDocuments(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self._write("noisewords.txt", "the\na\nis\nand\nof\n")
        self._write("A.txt", "bus bus bus bus bus\nthe end\n")
        self._write("B.txt", "Bus, bus.\ncar\n")
        self._write("C.txt", "car car car car car\n")
        self._write("D.txt", "car! bus\n")
        self._write("docs.txt", "A.txt B.txt\nC.txt D.txt\n")

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def _write(self, name, text):
        with open(os.path.join(self.tmp, name), "w") as f:
            f.write(text)

    def _path(self, name):
        return os.path.join(self.tmp, name)

    def test_builds_ranked_index(self):
        index, summary = index_documents(self._path("docs.txt"), self._path("noisewords.txt"))

        self.assertTrue(index.frozen)
        self.assertEqual(summary["documents"], 4)
        self.assertEqual(summary["indexed"], 4)
        self.assertEqual(summary["missing"], [])
        self.assertEqual(summary["noise_words"], 5)
        self.assertEqual(index.keywords(), ["bus", "car", "end"])
        self.assertEqual(summary["keywords"], 3)
        self.assertEqual(
            list(index.get("bus")),
            [Occurrence("A.txt", 5), Occurrence("B.txt", 2), Occurrence("D.txt", 1)],
        )
        self.assertEqual(
            list(index.get("car")),
            [Occurrence("C.txt", 5), Occurrence("B.txt", 1), Occurrence("D.txt", 1)],
        )
        for occs in index.as_dict().values():
            self.assertTrue(is_ranked(occs))
            docs = [o.document for o in occs]
            self.assertEqual(len(docs), len(set(docs)))

    def test_missing_document_is_skipped(self):
        self._write("docs.txt", "A.txt ghost.txt C.txt\n")
        with self.assertLogs("wordcore.indexer", level="WARNING") as logs:
            index, summary = index_documents(self._path("docs.txt"), self._path("noisewords.txt"))

        self.assertEqual(summary["missing"], ["ghost.txt"])
        self.assertEqual(index.documents(), ("A.txt", "C.txt"))
        self.assertTrue(any("ghost.txt" in line for line in logs.output))

    def test_unopenable_document_is_skipped(self):
        os.mkdir(self._path("sub"))
        self._write("docs.txt", "A.txt sub C.txt\n")
        with self.assertLogs("wordcore.indexer", level="WARNING") as logs:
            index, summary = index_documents(self._path("docs.txt"), self._path("noisewords.txt"))

        self.assertEqual(summary["missing"], ["sub"])
        self.assertEqual(index.documents(), ("A.txt", "C.txt"))
        self.assertEqual(list(index.get("car")), [Occurrence("C.txt", 5)])
        self.assertTrue(any("sub" in line for line in logs.output))

    def test_duplicate_entries_are_merged_once(self):
        self._write("docs.txt", "A.txt A.txt B.txt\n")
        index, summary = index_documents(self._path("docs.txt"), self._path("noisewords.txt"))
        self.assertEqual(summary["duplicates"], ["A.txt"])
        self.assertEqual([o.document for o in index.get("bus")], ["A.txt", "B.txt"])

    def test_missing_sources_are_fatal(self):
        with self.assertRaises(FileNotFoundError):
            make_index(self._path("docs.txt"), self._path("missing-noise.txt"))
        with self.assertRaises(FileNotFoundError):
            make_index(self._path("missing-docs.txt"), self._path("noisewords.txt"))

    def test_documents_dir_override(self):
        os.mkdir(self._path("corpus"))
        with open(os.path.join(self.tmp, "corpus", "X.txt"), "w") as f:
            f.write("train train\n")
        self._write("docs.txt", "X.txt\n")
        index = make_index(
            self._path("docs.txt"), self._path("noisewords.txt"), documents_dir=self._path("corpus")
        )
        self.assertEqual(list(index.get("train")), [Occurrence("X.txt", 2)])

    def test_load_keywords_missing_document(self):
        with self.assertRaises(FileNotFoundError):
            load_keywords("ghost.txt", NOISE, self.tmp)

    def test_rebuild_gives_same_answers(self):
        first = make_index(self._path("docs.txt"), self._path("noisewords.txt"))
        second = make_index(self._path("docs.txt"), self._path("noisewords.txt"))
        self.assertEqual(first.as_dict(), second.as_dict())
        for kw1, kw2 in [("bus", "car"), ("car", "bus"), ("end", "zebra"), ("the", "a")]:
            self.assertEqual(top5_search(kw1, kw2, first), top5_search(kw1, kw2, second))


if __name__ == "__main__":
    unittest.main()
