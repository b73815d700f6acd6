"""Second half (rho-sigma pairs 3..5) of the kernel when x and y are both non-zero."""

from __future__ import annotations

import numpy as np

from kqed.stv import STV


def high_components(stv: STV) -> np.ndarray:
    """Return flat kernel entries 192..383 built from the STV terms."""
    f = stv.flat()
    v, tx, ty = f.vv, f.txv, f.tyv
    s = [a / 4.0 for a in f.sxv]
    sxy = [(a + b) / 4.0 for a, b in zip(f.sxv, f.syv)]

    kp = [
        # 192
        v[24] - v[36],
        v[8] + v[32] + v[47] - v[59] - 2 * (tx[8] + ty[8] + sxy[2]),
        -v[4] - v[16] - v[31] + v[55] + 2 * (tx[4] + ty[4] + sxy[1]),
        v[27] - v[39],
        -v[8] + v[32] - v[47] + v[59] - 2 * (tx[8] + s[2] - tx[8] - ty[8] - sxy[2]),
        v[24] + v[36] - 2 * tx[24],
        v[0] + v[15] - v[20] + v[40] - v[51] + v[60]
        - 2 * (tx[0] + tx[40] + tx[60] + sxy[0]) - 2 * ty[0] - ty[15] - ty[60],
        -v[11] + v[35] + v[44] - v[56] + ty[11] + ty[56],
        # 200
        v[4] - v[16] + v[31] - v[55] - 2 * (ty[4] - s[1] + sxy[1]),
        -v[0] - v[15] - v[20] + v[40] + v[51] - v[60]
        + 2 * (tx[0] + tx[20] + tx[60] + sxy[0]) + 2 * ty[0] + ty[15] + ty[60],
        -v[24] - v[36] + 2 * tx[36],
        v[7] - v[19] - v[28] + v[52] - ty[7] - ty[52],
        -v[27] + v[39],
        v[11] - v[35] + v[44] + v[56] - ty[11] - 2 * tx[56] - ty[56],
        -v[7] + v[19] - v[28] - v[52] + ty[7] + 2 * tx[52] + ty[52],
        v[24] - v[36],
        -v[8] - v[32] + v[47] - v[59] + 2 * (tx[8] + s[2]),
        v[24] - v[36] - 2 * ty[24],
        # 210
        v[0] + v[15] - v[20] - v[40] + v[51] - v[60]
        + 2 * (-tx[15] + tx[20] + tx[40] + tx[60]) - ty[15] + 2 * ty[20] + ty[60],
        -v[11] - v[35] - v[44] + v[56] + 2 * tx[11] + ty[11] - ty[56],
        -v[24] - v[36] + 2 * (tx[24] + ty[24]),
        -v[8] + v[32] + v[47] - v[59],
        v[4] + v[16] + v[31] + v[55] - 2 * (tx[31] + ty[31] + tx[16] + ty[16]),
        -v[27] - v[39] + 2 * (tx[27] + ty[27]),
        v[0] - v[15] + v[20] - v[40] + v[51] + v[60]
        - 2 * (tx[0] + tx[20] + tx[60] + s[0]) + ty[15] - 2 * ty[20] - ty[60],
        v[4] - v[16] - v[31] + v[55] + 2 * (ty[16] + ty[31]),
        v[8] + v[32] + v[47] + v[59] - 2 * (tx[32] + tx[47]),
        v[3] + v[12] + v[23] - v[43] - v[48] + v[63]
        - 2 * (tx[3] + tx[23] + tx[63] + s[3]) - ty[3] - 2 * ty[23] + ty[48],
        # 220
        v[11] - v[35] - v[44] - v[56] + 2 * tx[56] - ty[11] + ty[56],
        v[27] - v[39] - 2 * ty[27],
        -v[3] + v[12] - v[23] - v[43] + v[48] + v[63]
        + 2 * (tx[3] + tx[23] + tx[43] - tx[48]) + ty[3] + 2 * ty[23] - ty[48],
        -v[8] + v[32] - v[47] - v[59] + 2 * (tx[59] + s[2]),
        v[4] + v[16] - v[31] + v[55] - 2 * (tx[4] + s[1]),
        -v[0] - v[15] + v[20] + v[40] - v[51] + v[60]
        - 2 * (-tx[15] + tx[20] + tx[40] + tx[60]) + ty[15] - 2 * ty[40] - ty[60],
        v[24] - v[36] + 2 * ty[36],
        v[7] + v[19] + v[28] - v[52] - 2 * tx[7] - ty[7] + ty[52],
        -v[0] + v[15] + v[20] - v[40] - v[51] - v[60]
        + 2 * (tx[0] + tx[40] + tx[60] + s[0]) - ty[15] + 2 * ty[40] + ty[60],
        -v[4] - v[16] - v[31] - v[55] + 2 * (tx[16] + tx[31]),
        # 230
        -v[8] + v[32] + v[47] - v[59] - 2 * (ty[32] + ty[47]),
        -v[3] - v[12] + v[23] - v[43] + v[48] - v[63]
        + 2 * (tx[3] + tx[43] + tx[63] + s[3]) + ty[3] + 2 * ty[43] - ty[48],
        v[24] + v[36] - 2 * (tx[36] + ty[36]),
        -v[8] - v[32] - v[47] - v[59] + 2 * (tx[32] + ty[32] + tx[47] + ty[47]),
        v[4] - v[16] - v[31] + v[55],
        v[27] + v[39] - 2 * (tx[39] + ty[39]),
        -v[7] + v[19] + v[28] + v[52] + ty[7] - 2 * tx[52] - ty[52],
        v[3] - v[12] + v[23] + v[43] - v[48] - v[63]
        - 2 * (tx[3] + tx[23] + tx[43] - tx[48]) - ty[3] - 2 * ty[43] + ty[48],
        v[27] - v[39] + 2 * ty[39],
        v[4] - v[16] + v[31] + v[55] - 2 * (tx[55] + s[1]),
        # 240
        v[27] - v[39],
        v[11] + v[35] - v[44] + v[56] - 2 * tx[11] - ty[11] - ty[56],
        -v[7] - v[19] + v[28] - v[52] + 2 * tx[7] + ty[7] + ty[52],
        -v[24] + v[36],
        -v[11] + v[35] + v[44] - v[56] + ty[11] + ty[56],
        v[27] + v[39] - 2 * tx[27],
        v[3] - v[12] - v[23] + v[43] + v[48] + v[63]
        - 2 * (tx[3] + tx[43] + tx[63] + sxy[3]) - ty[3] - ty[48] - 2 * ty[63],
        v[8] - v[32] + v[47] - v[59] + 2 * (ty[59] - s[2] + sxy[2]),
        v[7] - v[19] - v[28] + v[52] - ty[7] - ty[52],
        -v[3] + v[12] - v[23] + v[43] - v[48] - v[63]
        + 2 * (tx[3] + tx[23] + tx[63] + sxy[3]) + ty[3] + ty[48] + 2 * ty[63],
        # 250
        -v[27] - v[39] + 2 * tx[39],
        -v[4] + v[16] - v[31] + v[55] - 2 * (ty[55] - s[1] + sxy[1]),
        v[24] - v[36],
        -v[8] + v[32] + v[47] + v[59] - 2 * (tx[59] + ty[59] + sxy[2]),
        v[4] - v[16] - v[31] - v[55] + 2 * (tx[55] + ty[55] + sxy[1]),
        v[27] - v[39],
        v[28] - v[52],
        v[12] - v[46] + v[48] + v[58] - 2 * (tx[12] + ty[12] + sxy[3]),
        v[30] - v[54],
        -v[4] - v[16] - v[26] + v[38] + 2 * (tx[4] + ty[4] + sxy[1]),
        # 260
        -v[12] + v[46] + v[48] - v[58] + 2 * (ty[12] - s[3] + sxy[3]),
        v[28] + v[52] - 2 * tx[28],
        -v[14] - v[44] + v[50] + v[56] + ty[14] + ty[44],
        v[0] + v[10] - v[20] - v[34] + v[40] + v[60]
        - 2 * (tx[0] + tx[40] + tx[60] + sxy[0]) - 2 * ty[0] - ty[10] - ty[40],
        -v[30] + v[54],
        v[14] + v[44] - v[50] + v[56] - ty[14] - 2 * tx[44] - ty[44],
        v[28] - v[52],
        -v[6] + v[18] - v[24] - v[36] + ty[6] + 2 * tx[36] + ty[36],
        v[4] - v[16] + v[26] - v[38] - 2 * (ty[4] - s[1] + sxy[1]),
        -v[0] - v[10] - v[20] + v[34] - v[40] + v[60]
        + 2 * (tx[0] + tx[20] + tx[40] + sxy[0]) + 2 * ty[0] + ty[10] + ty[40],
        # 270
        v[6] - v[18] - v[24] + v[36] - ty[6] - ty[36],
        -v[28] - v[52] + 2 * tx[52],
        -v[12] - v[46] - v[48] + v[58] + 2 * (tx[12] + s[3]),
        v[28] - v[52] - 2 * ty[28],
        -v[14] + v[44] - v[50] - v[56] + 2 * tx[14] + ty[14] - ty[44],
        v[0] + v[10] - v[20] + v[34] - v[40] - v[60]
        + 2 * (-tx[10] + tx[20] + tx[40] + tx[60]) - ty[10] + 2 * ty[20] + ty[40],
        -v[28] - v[52] + 2 * (tx[28] + ty[28]),
        -v[12] - v[46] + v[48] + v[58],
        -v[30] - v[54] + 2 * (tx[30] + ty[30]),
        v[26] + v[38] + v[4] + v[16] - 2 * (tx[16] + tx[26] + ty[16] + ty[26]),
        # 280
        v[14] - v[44] - v[50] - v[56] - ty[14] + 2 * tx[44] + ty[44],
        v[30] - v[54] - 2 * ty[30],
        -v[12] - v[46] + v[48] - v[58] + 2 * (tx[46] + s[3]),
        -v[2] + v[8] - v[22] + v[32] + v[42] - v[62]
        + 2 * (tx[2] + tx[22] - tx[32] + tx[62]) + ty[2] + 2 * ty[22] - ty[32],
        v[0] - v[10] + v[20] + v[34] + v[40] - v[60]
        - 2 * (tx[0] + tx[20] + tx[40] + s[0]) + ty[10] - 2 * ty[20] - ty[40],
        v[4] - v[16] - v[26] + v[38] + 2 * (ty[16] + ty[26]),
        v[2] + v[8] + v[22] - v[32] + v[42] - v[62]
        - 2 * (tx[2] + tx[22] + tx[42] + s[2]) - ty[2] - 2 * ty[22] + ty[32],
        v[12] + v[46] + v[48] + v[58] - 2 * (tx[48] + tx[58]),
        v[30] - v[54],
        v[14] + v[44] + v[50] - v[56] - 2 * tx[14] - ty[14] - ty[44],
        # 290
        -v[28] + v[52],
        -v[6] - v[18] + v[24] - v[36] + 2 * tx[6] + ty[6] + ty[36],
        -v[14] - v[44] + v[50] + v[56] + ty[14] + ty[44],
        v[30] + v[54] - 2 * tx[30],
        v[12] - v[46] - v[48] + v[58] + 2 * (ty[46] - s[3] + sxy[3]),
        v[2] - v[8] - v[22] + v[32] + v[42] + v[62]
        - 2 * (tx[2] + tx[42] + tx[62] + sxy[2]) - ty[2] - ty[32] - 2 * ty[42],
        v[28] - v[52],
        -v[12] + v[46] + v[48] + v[58] - 2 * (tx[46] + ty[46] + sxy[3]),
        v[30] - v[54],
        v[4] - v[16] - v[26] - v[38] + 2 * (tx[38] + ty[38] + sxy[1]),
        # 300
        v[6] - v[18] - v[24] + v[36] - ty[6] - ty[36],
        -v[2] + v[8] - v[22] - v[32] - v[42] + v[62]
        + 2 * (tx[2] + tx[22] + tx[42] + sxy[2]) + ty[2] + ty[32] + 2 * ty[42],
        -v[4] + v[16] - v[26] + v[38] - 2 * (ty[38] - s[1] + sxy[1]),
        -v[30] - v[54] + 2 * tx[54],
        v[4] + v[16] - v[26] + v[38] - 2 * (tx[4] + s[1]),
        -v[0] - v[10] + v[20] - v[34] + v[40] + v[60]
        - 2 * (-tx[10] + tx[20] + tx[40] + tx[60]) + ty[10] - ty[40] - 2 * ty[60],
        v[6] + v[18] + v[24] - v[36] - 2 * tx[6] - ty[6] + ty[36],
        v[28] - v[52] + 2 * ty[52],
        -v[0] + v[10] + v[20] - v[34] - v[40] - v[60]
        + 2 * (tx[0] + tx[40] + tx[60] + s[0]) - ty[10] + ty[40] + 2 * ty[60],
        -v[4] - v[16] - v[26] - v[38] + 2 * (tx[16] + tx[26]),
        # 310
        -v[2] - v[8] + v[22] + v[32] - v[42] - v[62]
        + 2 * (tx[2] + tx[42] + tx[62] + s[2]) + ty[2] - ty[32] + 2 * ty[62],
        -v[12] - v[46] + v[48] + v[58] - 2 * (ty[48] + ty[58]),
        -v[6] + v[18] + v[24] + v[36] + ty[6] - 2 * tx[36] - ty[36],
        v[2] - v[8] + v[22] - v[32] - v[42] + v[62]
        - 2 * (tx[2] + tx[22] - tx[32] + tx[62]) - ty[2] + ty[32] - 2 * ty[62],
        v[4] - v[16] + v[26] + v[38] - 2 * (tx[38] + s[1]),
        v[30] - v[54] + 2 * ty[54],
        v[28] + v[52] - 2 * (tx[52] + ty[52]),
        -v[12] - v[48] - v[46] - v[58] + 2 * (tx[48] + ty[48] + tx[58] + ty[58]),
        v[30] + v[54] - 2 * (tx[54] + ty[54]),
        v[4] - v[16] - v[26] + v[38],
        # 320
        v[44] - v[56],
        v[45] - v[57],
        v[12] + v[48] - v[29] + v[53] - 2 * (tx[12] + ty[12] + sxy[3]),
        -v[8] + v[25] - v[32] - v[37] + 2 * (tx[8] + ty[8] + sxy[2]),
        -v[45] + v[57],
        v[44] - v[56],
        v[13] + v[28] - v[49] + v[52] - ty[13] - 2 * tx[28] - ty[28],
        -v[9] - v[24] + v[33] - v[36] + ty[9] + 2 * tx[24] + ty[24],
        -v[12] + v[48] + v[29] - v[53] + 2 * (ty[12] - s[3] + sxy[3]),
        -v[13] - v[28] + v[49] + v[52] + ty[13] + ty[28],
        # 330
        v[44] + v[56] - 2 * tx[44],
        v[0] + v[5] - v[17] + v[20] - v[40] + v[60]
        - 2 * (tx[0] + tx[20] + tx[60] + sxy[0]) - 2 * ty[0] - ty[5] - ty[20],
        v[8] - v[25] - v[32] + v[37] - 2 * (ty[8] - s[2] + sxy[2]),
        v[9] + v[24] - v[33] - v[36] - ty[9] - ty[24],
        -v[0] - v[5] + v[17] - v[20] - v[40] + v[60]
        + 2 * (tx[0] + tx[20] + tx[40] + sxy[0]) + 2 * ty[0] + ty[5] + ty[20],
        -v[44] - v[56] + 2 * tx[56],
        v[45] - v[57],
        -v[44] + v[56],
        v[13] + v[28] + v[49] - v[52] - 2 * tx[13] - ty[13] - ty[28],
        -v[9] - v[24] - v[33] + v[36] + 2 * tx[9] + ty[9] + ty[24],
        # 340
        v[44] - v[56],
        v[45] - v[57],
        -v[12] + v[29] + v[48] + v[53] - 2 * (tx[29] + ty[29] + sxy[3]),
        v[8] - v[25] - v[32] - v[37] + 2 * (tx[25] + ty[25] + sxy[2]),
        -v[13] - v[28] + v[49] + v[52] + ty[13] + ty[28],
        v[12] - v[29] - v[48] + v[53] + 2 * (ty[29] - s[3] + sxy[3]),
        v[45] + v[57] - 2 * tx[45],
        v[1] - v[4] + v[16] + v[21] - v[41] + v[61]
        - 2 * (tx[1] + tx[21] + tx[61] + sxy[1]) - ty[1] - ty[16] - 2 * ty[21],
        v[9] + v[24] - v[33] - v[36] - ty[9] - ty[24],
        -v[8] + v[25] + v[32] - v[37] - 2 * (ty[25] - s[2] + sxy[2]),
        # 350
        -v[1] + v[4] - v[16] - v[21] - v[41] + v[61]
        + 2 * (tx[1] + tx[21] + tx[41] + sxy[1]) + ty[1] + ty[16] + 2 * ty[21],
        -v[45] - v[57] + 2 * tx[57],
        -v[12] - v[29] - v[48] + v[53] + 2 * (tx[12] + s[3]),
        -v[13] + v[28] - v[49] - v[52] + 2 * tx[13] + ty[13] - ty[28],
        v[44] - v[56] - 2 * ty[44],
        v[0] + v[5] + v[17] - v[20] - v[40] - v[60]
        + 2 * (-tx[5] + tx[20] + tx[40] + tx[60]) - ty[5] + ty[20] + 2 * ty[40],
        v[13] - v[28] - v[49] - v[52] + 2 * tx[28] - ty[13] + ty[28],
        -v[12] - v[29] + v[48] - v[53] + 2 * (tx[29] + s[3]),
        v[45] - v[57] - 2 * ty[45],
        -v[1] + v[4] + v[16] + v[21] - v[41] - v[61]
        + 2 * (tx[1] - tx[16] + tx[41] + tx[61]) + ty[1] - ty[16] + 2 * ty[41],
        # 360
        -v[44] - v[56] + 2 * (tx[44] + ty[44]),
        -v[45] - v[57] + 2 * (tx[45] + ty[45]),
        -v[12] - v[29] + v[48] + v[53],
        v[8] + v[25] + v[32] + v[37] - 2 * (tx[32] + ty[32] + tx[37] + ty[37]),
        v[0] - v[5] + v[17] + v[20] + v[40] - v[60]
        - 2 * (tx[0] + tx[20] + tx[40] + s[0]) + ty[5] - ty[20] - 2 * ty[40],
        v[1] + v[4] - v[16] + v[21] + v[41] - v[61]
        - 2 * (tx[1] + tx[21] + tx[41] + s[1]) - ty[1] + ty[16] - 2 * ty[41],
        v[8] + v[25] - v[32] - v[37] + 2 * (ty[32] + ty[37]),
        v[12] + v[29] + v[48] + v[53] - 2 * (tx[48] + tx[53]),
        v[8] + v[25] + v[32] - v[37] - 2 * (tx[8] + s[2]),
        v[9] - v[24] + v[33] + v[36] - 2 * tx[9] - ty[9] + ty[24],
        # 370
        -v[0] - v[5] - v[17] + v[20] + v[40] + v[60]
        - 2 * (-tx[5] + tx[20] + tx[40] + tx[60]) + ty[5] - ty[20] - 2 * ty[60],
        v[44] - v[56] + 2 * ty[56],
        -v[9] + v[24] + v[33] + v[36] + ty[9] - 2 * tx[24] - ty[24],
        v[8] + v[25] - v[32] + v[37] - 2 * (tx[25] + s[2]),
        v[1] - v[4] - v[16] - v[21] + v[41] + v[61]
        - 2 * (tx[1] - tx[16] + tx[41] + tx[61]) - ty[1] + ty[16] - 2 * ty[61],
        v[45] - v[57] + 2 * ty[57],
        -v[0] + v[5] - v[17] - v[20] + v[40] - v[60]
        + 2 * (tx[0] + tx[20] + tx[60] + s[0]) - ty[5] + ty[20] + 2 * ty[60],
        -v[1] - v[4] + v[16] - v[21] + v[41] - v[61]
        + 2 * (tx[1] + tx[21] + tx[61] + s[1]) + ty[1] - ty[16] + 2 * ty[61],
        -v[8] - v[25] - v[32] - v[37] + 2 * (tx[32] + tx[37]),
        -v[12] - v[29] + v[48] + v[53] - 2 * (ty[48] + ty[53]),
        # 380
        v[44] + v[56] - 2 * (tx[56] + ty[56]),
        v[45] + v[57] - 2 * (tx[57] + ty[57]),
        -v[12] - v[29] - v[48] - v[53] + 2 * (tx[48] + ty[48] + tx[53] + ty[53]),
        v[8] + v[25] - v[32] - v[37],
    ]
    return np.array(kp, dtype=float)