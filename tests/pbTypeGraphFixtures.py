from io import StringIO
from typing import Sequence

from hwtArchLink.annotation.pbTypeAnnotation import PbTypeAnnotation
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.pbType.graph import PbTypeGraph
from hwtArchLink.pbType.pbType import PB_PORT_DIRECTION
from hwtArchLink.platform.platform import DefaultArchLinkPlatform

IN = PB_PORT_DIRECTION.IN
OUT = PB_PORT_DIRECTION.OUT
CLOCK = PB_PORT_DIRECTION.CLOCK


def createCtx(graph: PbTypeGraph, annotations: Sequence[PbTypeAnnotation]=()) -> ArchLinkCtx:
    """
    :return: context with log captured in ctx.platform.logStream (StringIO)
    """
    return ArchLinkCtx(graph, annotations, platform=DefaultArchLinkPlatform(logStream=StringIO()))


def twoModeRootGraph() -> PbTypeGraph:
    """
    A[m1] -> B (primitive)
    A[m2] -> C (primitive)
    """
    g = PbTypeGraph("twoModeRoot")
    a = g.addRoot("A")
    a.addMode("m1").addChild("B", blifModel=".names")
    a.addMode("m2").addChild("C", blifModel=".latch")
    return g


def singleModeChainGraph() -> PbTypeGraph:
    """
    A[only] -> D[solo] -> lut (primitive)
    """
    g = PbTypeGraph("singleModeChain")
    a = g.addRoot("A")
    d = a.addMode("only").addChild("D")
    d.addMode("solo").addChild("lut", blifModel=".names")
    return g


def opPhyPairGraph() -> PbTypeGraph:
    """
    top[op_mode] -> OP (in[4])
    top[phy_mode] -> PH (in[8])
    """
    g = PbTypeGraph("opPhyPair")
    top = g.addRoot("top")
    op = top.addMode("op_mode").addChild("OP", blifModel=".subckt op")
    op.addPort("in", 4, IN)
    ph = top.addMode("phy_mode").addChild("PH", blifModel=".subckt ph")
    ph.addPort("in", 8, IN)
    return g


def fracLutClbGraph() -> PbTypeGraph:
    """
    A fragment of a fracturable LUT6 logic block

    .. code-block:: text

        clb[default]
          fle[physical]
            fabric[default]
              frac_logic[default]
                frac_lut6 (in[6], lut5_out[2], lut6_out[1])
              ff (D, Q, clk)
          fle[n1_lut6]
            ble6[default]
              lut6 (in[6], out[1])
              ff (D, Q, clk)
        io[io_input]
          inpad
        io[io_output]
          outpad
    """
    g = PbTypeGraph("fracLutClb")
    clb = g.addRoot("clb")
    clb.addPort("I", 6, IN)
    clb.addPort("O", 2, OUT)
    clb.addPort("clk", 1, CLOCK)

    fle = clb.addMode("default").addChild("fle")
    fle.addPort("in", 6, IN)
    fle.addPort("out", 2, OUT)
    fle.addPort("clk", 1, CLOCK)

    fabric = fle.addMode("physical").addChild("fabric")
    fabric.addPort("in", 6, IN)
    fabric.addPort("out", 2, OUT)
    fabric.addPort("clk", 1, CLOCK)
    fabricDefault = fabric.addMode("default")
    fracLogic = fabricDefault.addChild("frac_logic")
    fracLogic.addPort("in", 6, IN)
    fracLogic.addPort("out", 2, OUT)
    fracLut6 = fracLogic.addMode("default").addChild("frac_lut6", blifModel=".subckt frac_lut6")
    fracLut6.addPort("in", 6, IN)
    fracLut6.addPort("lut5_out", 2, OUT)
    fracLut6.addPort("lut6_out", 1, OUT)
    ff = fabricDefault.addChild("ff", blifModel=".latch")
    ff.addPort("D", 1, IN)
    ff.addPort("Q", 1, OUT)
    ff.addPort("clk", 1, CLOCK)

    ble6 = fle.addMode("n1_lut6").addChild("ble6")
    ble6.addPort("in", 6, IN)
    ble6.addPort("out", 1, OUT)
    ble6.addPort("clk", 1, CLOCK)
    ble6Default = ble6.addMode("default")
    lut6 = ble6Default.addChild("lut6", blifModel=".names")
    lut6.addPort("in", 6, IN)
    lut6.addPort("out", 1, OUT)
    ff = ble6Default.addChild("ff", blifModel=".latch")
    ff.addPort("D", 1, IN)
    ff.addPort("Q", 1, OUT)
    ff.addPort("clk", 1, CLOCK)

    io = g.addRoot("io")
    io.addPort("outpad", 1, IN)
    io.addPort("inpad", 1, OUT)
    inpad = io.addMode("io_input").addChild("inpad", blifModel=".input")
    inpad.addPort("inpad", 1, OUT)
    outpad = io.addMode("io_output").addChild("outpad", blifModel=".output")
    outpad.addPort("outpad", 1, IN)
    return g


FRAC_LUT_CLB_LUT6_PATH = "clb[default].fle[n1_lut6].ble6[default].lut6"
FRAC_LUT_CLB_FRAC_LUT6_PATH = "clb[default].fle[physical].fabric[default].frac_logic[default].frac_lut6"
FRAC_LUT_CLB_OP_FF_PATH = "clb[default].fle[n1_lut6].ble6[default].ff"
FRAC_LUT_CLB_PHY_FF_PATH = "clb[default].fle[physical].fabric[default].ff"


def fracLutClbPhysicalModeAnnotations():
    return [
        PbTypeAnnotation.physical("clb[default].fle", physicalModeName="physical"),
        PbTypeAnnotation.physical("io", physicalModeName="io_input"),
    ]
