#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.annotation.pbTypeAnnotation import PbTypeAnnotation
from hwtArchLink.basicPort import BasicPort
from hwtArchLink.link.physicalPbType import ArchLinkPassPhysicalPbTypeAnnotation, \
    pairOperatingAndPhysicalPbTypes
from tests.pbTypeGraphFixtures import createCtx, opPhyPairGraph, fracLutClbGraph, \
    FRAC_LUT_CLB_LUT6_PATH, FRAC_LUT_CLB_FRAC_LUT6_PATH, FRAC_LUT_CLB_OP_FF_PATH, \
    FRAC_LUT_CLB_PHY_FF_PATH, OUT


class PhysicalPbTypeAnnotation_TC(unittest.TestCase):

    def _opPhyPair(self):
        g = opPhyPairGraph()
        top, = g.roots
        op = top.findMode("op_mode").findChild("OP")
        ph = top.findMode("phy_mode").findChild("PH")
        return g, op, ph

    def _run(self, g, annotations):
        ctx = createCtx(g, annotations)
        p = ArchLinkPassPhysicalPbTypeAnnotation()
        p.runOnArchLinkCtx(ctx)
        return ctx, p

    def test_implicitPortMapping(self):
        g, op, ph = self._opPhyPair()
        ctx, p = self._run(g, [PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH")])
        index = ctx.index
        self.assertEqual(p.errors, [])
        self.assertEqual(p.pairedCnt, 1)
        self.assertIs(index.physicalPbType(op), ph)
        self.assertIsNone(index.physicalPbType(ph))
        opIn, = op.ports
        phIn, = ph.ports
        self.assertIs(index.physicalPbPort(opIn), phIn)
        self.assertEqual(index.physicalPbPortRange(opIn), BasicPort("in", 0, 3))
        self.assertIn("Annotate operating pb_type 'OP' to its physical pb_type 'PH'", ctx.platform.logStream.getvalue())

    def test_atomicPairing(self):
        g, op, _ = self._opPhyPair()
        # "out" does not exist on PH, "in" could be paired but it must not be recorded
        op.addPort("out", 1, OUT)
        ctx, p = self._run(g, [PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH")])
        self.assertEqual(p.pairedCnt, 0)
        self.assertEqual(len(p.errors), 1)
        self.assertEqual(p.errors[0], "Unable to pair the operating pb_type 'top[op_mode].OP' "
                                      "to its physical pb_type 'top[phy_mode].PH'!")
        self.assertEqual(ctx.index.physicalPbTypeCnt(), 0)
        self.assertEqual(ctx.index.physicalPbPortCnt(), 0)
        self.assertSequenceEqual(ctx.errors, p.errors)

    def test_explicitPortRange(self):
        g, op, ph = self._opPhyPair()
        ctx, p = self._run(g, [
            PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH", {"in": BasicPort("in", 4, 7)}),
        ])
        self.assertEqual(p.errors, [])
        opIn, = op.ports
        self.assertIs(ctx.index.physicalPbPort(opIn), ph.ports[0])
        self.assertEqual(ctx.index.physicalPbPortRange(opIn), BasicPort("in", 4, 7))

    def test_explicitPortRangeOutOfBounds(self):
        g, _, _ = self._opPhyPair()
        ctx, p = self._run(g, [
            PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH", {"in": BasicPort("in", 4, 11)}),
        ])
        self.assertEqual(len(p.errors), 1)
        self.assertEqual(ctx.index.physicalPbTypeCnt(), 0)

    def test_explicitPortRename(self):
        g = fracLutClbGraph()
        ctx, p = self._run(g, [
            PbTypeAnnotation.operating(FRAC_LUT_CLB_LUT6_PATH, FRAC_LUT_CLB_FRAC_LUT6_PATH,
                                       {"out": BasicPort("lut6_out", 0, 0)}),
            PbTypeAnnotation.operating(FRAC_LUT_CLB_OP_FF_PATH, FRAC_LUT_CLB_PHY_FF_PATH),
        ])
        self.assertEqual(p.errors, [])
        self.assertEqual(p.pairedCnt, 2)
        index = ctx.index
        pairs = sorted((op.getHierarchyName(), phy.getHierarchyName()) for op, phy in index.iterPhysicalPbTypes())
        self.assertSequenceEqual(pairs, [
            (FRAC_LUT_CLB_OP_FF_PATH, FRAC_LUT_CLB_PHY_FF_PATH),
            (FRAC_LUT_CLB_LUT6_PATH, FRAC_LUT_CLB_FRAC_LUT6_PATH),
        ])
        ports = {(op.name, phy.name, r.msb, r.lsb)
                 for op, phy, r in index.iterPhysicalPbPorts()
                 if op.parent.name == "lut6"}
        self.assertSetEqual(ports, {
            ("in", "in", 5, 0),
            ("out", "lut6_out", 0, 0),
        })
        self.assertEqual(index.physicalPbPortCnt(), 2 + 3)

    def test_failureDoesNotStopOtherRecords(self):
        g = fracLutClbGraph()
        ctx, p = self._run(g, [
            # without explicit mapping "out" has no counterpart on frac_lut6
            PbTypeAnnotation.operating(FRAC_LUT_CLB_LUT6_PATH, FRAC_LUT_CLB_FRAC_LUT6_PATH),
            PbTypeAnnotation.operating("clb[default].fle[n1_lut6].ble6[default].dsp", FRAC_LUT_CLB_PHY_FF_PATH),
            PbTypeAnnotation.operating(FRAC_LUT_CLB_OP_FF_PATH, FRAC_LUT_CLB_PHY_FF_PATH),
        ])
        self.assertEqual(len(p.errors), 2)
        self.assertIn(FRAC_LUT_CLB_LUT6_PATH, p.errors[0])
        self.assertIn("ble6[default].dsp", p.errors[1])
        self.assertEqual(p.pairedCnt, 1)
        self.assertEqual(ctx.index.physicalPbTypeCnt(), 1)
        self.assertIn("Error: Unable to pair the operating pb_type", ctx.platform.logStream.getvalue())

    def test_conflictingPairing(self):
        g, op, ph = self._opPhyPair()
        top, = g.roots
        ph2 = top.findMode("phy_mode").addChild("PH2", blifModel=".subckt ph")
        ph2.addPort("in", 8)
        ctx, p = self._run(g, [
            PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH"),
            PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH"),
            PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH2"),
        ])
        self.assertEqual(p.pairedCnt, 2)
        self.assertEqual(len(p.errors), 1)
        self.assertIn("'top[phy_mode].PH2'", p.errors[0])
        self.assertIs(ctx.index.physicalPbType(op), ph)

    def test_physicalRecordsSkipped(self):
        g, _, _ = self._opPhyPair()
        ctx, p = self._run(g, [
            PbTypeAnnotation.physical("top", "phy_mode"),
            PbTypeAnnotation.physical("does[not].exist"),
        ])
        self.assertEqual(p.errors, [])
        self.assertEqual(p.pairedCnt, 0)
        self.assertEqual(ctx.index.physicalPbTypeCnt(), 0)
        self.assertEqual(ctx.index.physicalModeCnt(), 0)

    def test_pairOperatingAndPhysicalPbTypes(self):
        _, op, ph = self._opPhyPair()
        index = PbTypeAnnotationIndex()
        a = PbTypeAnnotation.operating("top[op_mode].OP", "top[phy_mode].PH")
        # PH.in is wider than OP.in, the opposite direction does not fit
        self.assertFalse(pairOperatingAndPhysicalPbTypes(ph, op, a, index))
        self.assertEqual(index.physicalPbPortCnt(), 0)
        self.assertTrue(pairOperatingAndPhysicalPbTypes(op, ph, a, index))
        # repeated pairing is accepted and does not change anything
        self.assertTrue(pairOperatingAndPhysicalPbTypes(op, ph, a, index))
        self.assertEqual(index.physicalPbTypeCnt(), 1)
        self.assertEqual(index.physicalPbPortCnt(), 1)


if __name__ == "__main__":
    testLoader = unittest.TestLoader()
    suite = testLoader.loadTestsFromTestCase(PhysicalPbTypeAnnotation_TC)
    runner = unittest.TextTestRunner(verbosity=3)
    runner.run(suite)
