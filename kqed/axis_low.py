"""First half (rho-sigma pairs 0..2) of the kernel when x or y is zero."""

from __future__ import annotations

import numpy as np

from kqed.stv import STV


def low_components(stv: STV) -> np.ndarray:
    """Return flat kernel entries 0..191 for an argument at the origin.

    Only the vector term and the two tensor terms enter; the scalar parts are
    already folded into the tensor terms in this case.
    """
    f = stv.flat()
    v, tx, ty = f.vv, f.txv, f.tyv

    kp = [
        v[26] + v[31] - v[38] - v[55],
        v[10] + v[15] + v[34] + v[51] - 2 * (ty[10] + ty[15]),
        -v[6] - v[18] + 2 * ty[6],
        -v[7] - v[19] + 2 * ty[7],
        -v[10] - v[15] + v[34] + v[51] - 2 * (tx[34] + tx[51] - ty[10] - ty[15]),
        v[26] + v[31] + v[38] + v[55] - 2 * (tx[38] + tx[55]),
        v[2] - v[22] + v[42] - v[47] + v[59] + v[62] - 2 * tx[42] - tx[59] - tx[62]
        - 2 * ty[2] + ty[47] - ty[62],
        v[3] - v[23] + v[43] + v[46] - v[58] + v[63] - tx[43] - tx[46] - 2 * tx[63]
        - 2 * ty[3] - ty[43] + ty[58],
        v[6] - v[18] + 2 * (tx[18] - ty[6]),
        -v[2] - v[22] + v[42] + v[47] + v[59] - v[62] + 2 * tx[22] - tx[59] + tx[62]
        + 2 * ty[2] - ty[47] + ty[62],
        # 10
        -v[26] - v[38] + v[31] - v[55] + 2 * tx[26],
        -v[27] - v[30] - v[39] + v[54] + tx[27] + tx[30] + ty[39] - ty[54],
        v[7] - v[19] + 2 * (tx[19] - ty[7]),
        -v[3] - v[23] - v[43] + v[46] + v[58] + v[63] + 2 * tx[23] + tx[43] - tx[46]
        + 2 * ty[3] + ty[43] - ty[58],
        -v[27] - v[30] + v[39] - v[54] + tx[27] + tx[30] - ty[39] + ty[54],
        v[26] - v[31] - v[38] - v[55] + 2 * tx[31],
        -v[10] - v[15] - v[34] - v[51] + 2 * (tx[34] + tx[51]),
        v[26] + v[31] - v[38] - v[55] + 2 * (tx[38] + tx[55] - ty[26] - ty[31]),
        v[2] - v[22] - v[42] + v[47] - v[59] - v[62] + 2 * tx[42] + tx[59] + tx[62]
        + 2 * ty[22] - ty[47] + ty[62],
        v[3] - v[23] - v[43] - v[46] + v[58] - v[63] + tx[43] + tx[46] + 2 * tx[63]
        + 2 * ty[23] + ty[43] - ty[58],
        # 20
        -v[26] - v[31] - v[38] - v[55] + 2 * (ty[26] + ty[31]),
        -v[10] - v[15] + v[34] + v[51],
        v[6] + v[18] - 2 * ty[18],
        v[7] + v[19] - 2 * ty[19],
        v[2] + v[22] - v[42] - v[47] - v[59] + v[62] - 2 * tx[2] + tx[59] - tx[62]
        - 2 * ty[22] + ty[47] - ty[62],
        v[6] - v[18] - 2 * (tx[6] - ty[18]),
        v[10] - v[15] + v[34] + v[51] - 2 * tx[10],
        v[11] + v[14] + v[35] - v[50] - tx[11] - tx[14] - ty[35] + ty[50],
        v[3] + v[23] + v[43] - v[46] - v[58] - v[63] - 2 * tx[3] - tx[43] + tx[46]
        - 2 * ty[23] - ty[43] + ty[58],
        v[7] - v[19] - 2 * (tx[7] - ty[19]),
        # 30
        v[11] + v[14] - v[35] + v[50] - tx[11] - tx[14] + ty[35] - ty[50],
        -v[10] + v[15] + v[34] + v[51] - 2 * tx[15],
        v[6] + v[18] - 2 * tx[18],
        -v[2] + v[22] + v[42] + v[47] - v[59] + v[62] - 2 * tx[22] + tx[59] - tx[62]
        - 2 * ty[42] - ty[47] - ty[62],
        v[26] - v[31] - v[38] + v[55] - 2 * (tx[26] - ty[38]),
        v[27] + v[30] - v[39] - v[54] - tx[27] - tx[30] + ty[39] + ty[54],
        -v[2] + v[22] - v[42] - v[47] + v[59] - v[62] + 2 * tx[2] - tx[59] + tx[62]
        + 2 * ty[42] + ty[47] + ty[62],
        -v[6] - v[18] + 2 * tx[6],
        -v[10] + v[15] + v[34] - v[51] + 2 * (tx[10] - ty[34]),
        -v[11] - v[14] + v[35] + v[50] + tx[11] + tx[14] - ty[35] - ty[50],
        # 40
        v[26] + v[31] + v[38] - v[55] - 2 * ty[38],
        -v[10] - v[15] - v[34] + v[51] + 2 * ty[34],
        v[6] - v[18],
        v[7] - v[19],
        -v[27] + v[30] + v[39] + v[54] + tx[27] - tx[30] - ty[39] - ty[54],
        v[11] - v[14] - v[35] - v[50] - tx[11] + tx[14] + ty[35] + ty[50],
        -v[7] + v[19],
        v[6] - v[18],
        v[7] + v[19] - 2 * tx[19],
        -v[3] + v[23] + v[43] - v[46] + v[58] + v[63] - 2 * tx[23] - tx[43] + tx[46]
        - ty[43] - ty[58] - 2 * ty[63],
        # 50
        v[27] + v[30] - v[39] - v[54] - tx[27] - tx[30] + ty[39] + ty[54],
        -v[26] + v[31] + v[38] - v[55] - 2 * (tx[31] - ty[55]),
        -v[3] + v[23] - v[43] + v[46] - v[58] - v[63] + 2 * tx[3] + tx[43] - tx[46]
        + ty[43] + ty[58] + 2 * ty[63],
        -v[7] - v[19] + 2 * tx[7],
        -v[11] - v[14] + v[35] + v[50] + tx[11] + tx[14] - ty[35] - ty[50],
        v[10] - v[15] - v[34] + v[51] + 2 * (tx[15] - ty[51]),
        v[27] - v[30] + v[39] + v[54] - tx[27] + tx[30] - ty[39] - ty[54],
        -v[11] + v[14] - v[35] - v[50] + tx[11] - tx[14] + ty[35] + ty[50],
        v[7] - v[19],
        -v[6] + v[18],
        # 60
        v[26] + v[31] - v[38] + v[55] - 2 * ty[55],
        -v[10] - v[15] + v[34] - v[51] + 2 * ty[51],
        v[6] - v[18],
        v[7] - v[19],
        -v[25] + v[37] + v[47] - v[59],
        -v[9] - v[33] + 2 * ty[9],
        v[5] + v[15] + v[17] + v[51] - 2 * (ty[5] + ty[15]),
        -v[11] - v[35] + 2 * ty[11],
        v[9] - v[33] + 2 * (tx[33] - ty[9]),
        -v[25] - v[37] + v[47] - v[59] + 2 * tx[37],
        # 70
        -v[1] + v[21] + v[31] - v[41] + v[55] - v[61] + 2 * tx[41] - tx[55] + tx[61]
        + 2 * ty[1] - ty[31] + ty[61],
        -v[27] - v[39] - v[45] + v[57] + tx[39] + tx[45] + ty[27] - ty[57],
        -v[5] - v[15] + v[17] + v[51] - 2 * (tx[17] + tx[51] - ty[5] - ty[15]),
        v[1] + v[21] - v[31] - v[41] + v[55] + v[61] - 2 * tx[21] - tx[55] - tx[61]
        - 2 * ty[1] + ty[31] - ty[61],
        v[25] + v[37] + v[47] + v[59] - 2 * (tx[25] + tx[59]),
        v[3] + v[23] + v[29] - v[43] - v[53] + v[63] - tx[23] - tx[29] - 2 * tx[63]
        - 2 * ty[3] - ty[23] + ty[53],
        v[11] - v[35] + 2 * (tx[35] - ty[11]),
        v[27] - v[39] - v[45] - v[57] + tx[39] + tx[45] - ty[27] + ty[57],
        -v[3] - v[23] + v[29] - v[43] + v[53] + v[63] + tx[23] - tx[29] + 2 * tx[43]
        + 2 * ty[3] + ty[23] - ty[53],
        -v[25] + v[37] - v[47] - v[59] + 2 * tx[47],
        # 80
        v[9] + v[33] - 2 * tx[33],
        -v[25] + v[37] - v[47] + v[59] + 2 * (ty[25] - tx[37]),
        -v[1] + v[21] + v[31] + v[41] - v[55] + v[61] - 2 * tx[41] + tx[55] - tx[61]
        - 2 * ty[21] - ty[31] - ty[61],
        -v[27] + v[39] + v[45] - v[57] - tx[39] - tx[45] + ty[27] + ty[57],
        v[25] + v[37] + v[47] - v[59] - 2 * ty[25],
        v[9] - v[33],
        -v[5] - v[15] - v[17] + v[51] + 2 * ty[17],
        v[11] - v[35],
        -v[1] - v[21] - v[31] + v[41] + v[55] - v[61] + 2 * tx[1] - tx[55] + tx[61]
        + 2 * ty[21] + ty[31] + ty[61],
        -v[5] + v[15] + v[17] - v[51] + 2 * (tx[5] - ty[17]),
        # 90
        -v[9] - v[33] + 2 * tx[9],
        -v[7] - v[13] + v[19] + v[49] + tx[7] + tx[13] - ty[19] - ty[49],
        v[27] - v[39] + v[45] + v[57] + tx[39] - tx[45] - ty[27] - ty[57],
        -v[11] + v[35],
        v[7] - v[13] - v[19] - v[49] - tx[7] + tx[13] + ty[19] + ty[49],
        v[9] - v[33],
        -v[5] - v[15] - v[17] - v[51] + 2 * (tx[17] + tx[51]),
        v[1] - v[21] + v[31] - v[41] - v[55] - v[61] + 2 * tx[21] + tx[55] + tx[61]
        - ty[31] + 2 * ty[41] + ty[61],
        -v[25] + v[37] + v[47] - v[59] + 2 * (tx[25] + tx[59] - ty[37] - ty[47]),
        v[3] - v[23] - v[29] - v[43] + v[53] - v[63] + tx[23] + tx[29] + 2 * tx[63]
        + ty[23] + 2 * ty[43] - ty[53],
        # 100
        v[1] - v[21] - v[31] + v[41] - v[55] + v[61] - 2 * tx[1] + tx[55] - tx[61]
        + ty[31] - 2 * ty[41] - ty[61],
        v[5] - v[15] + v[17] + v[51] - 2 * tx[5],
        v[9] - v[33] - 2 * (tx[9] - ty[33]),
        v[7] + v[13] + v[19] - v[49] - tx[7] - tx[13] - ty[19] + ty[49],
        -v[25] - v[37] - v[47] - v[59] + 2 * (ty[47] + ty[37]),
        v[9] + v[33] - 2 * ty[33],
        -v[5] - v[15] + v[17] + v[51],
        v[11] + v[35] - 2 * ty[35],
        v[3] + v[23] - v[29] + v[43] - v[53] - v[63] - 2 * tx[3] - tx[23] + tx[29]
        - ty[23] - 2 * ty[43] + ty[53],
        v[7] + v[13] - v[19] + v[49] - tx[7] - tx[13] + ty[19] - ty[49],
        # 110
        v[11] - v[35] - 2 * (tx[11] - ty[35]),
        -v[5] + v[15] + v[17] + v[51] - 2 * tx[15],
        v[11] + v[35] - 2 * tx[35],
        -v[27] + v[39] + v[45] - v[57] - tx[39] - tx[45] + ty[27] + ty[57],
        -v[3] + v[23] - v[29] + v[43] + v[53] + v[63] - tx[23] + tx[29] - 2 * tx[43]
        - ty[23] - ty[53] - 2 * ty[63],
        v[25] - v[37] + v[47] - v[59] - 2 * (tx[47] - ty[59]),
        v[27] + v[39] - v[45] + v[57] - tx[39] + tx[45] - ty[27] - ty[57],
        v[11] - v[35],
        -v[7] + v[13] - v[19] - v[49] + tx[7] - tx[13] + ty[19] + ty[49],
        -v[9] + v[33],
        # 120
        -v[3] - v[23] + v[29] + v[43] - v[53] - v[63] + 2 * tx[3] + tx[23] - tx[29]
        + ty[23] + ty[53] + 2 * ty[63],
        -v[7] - v[13] + v[19] + v[49] + tx[7] + tx[13] - ty[19] - ty[49],
        -v[11] - v[35] + 2 * tx[11],
        v[5] - v[15] - v[17] + v[51] + 2 * (tx[15] - ty[51]),
        -v[25] + v[37] + v[47] + v[59] - 2 * ty[59],
        v[9] - v[33],
        -v[5] - v[15] + v[17] - v[51] + 2 * ty[51],
        v[11] - v[35],
        -v[29] - v[46] + v[53] + v[58],
        -v[13] - v[49] + 2 * ty[13],
        # 130
        -v[14] - v[50] + 2 * ty[14],
        v[5] + v[10] + v[17] + v[34] - 2 * (ty[5] + ty[10]),
        v[13] - v[49] + 2 * (tx[49] - ty[13]),
        -v[29] - v[46] - v[53] + v[58] + 2 * tx[53],
        -v[30] + v[45] - v[54] - v[57] + tx[54] + tx[57] + ty[30] - ty[45],
        -v[1] + v[21] + v[26] + v[38] - v[41] - v[61] - tx[38] + tx[41] + 2 * tx[61]
        + 2 * ty[1] - ty[26] + ty[41],
        v[14] - v[50] + 2 * (tx[50] - ty[14]),
        v[30] - v[45] - v[54] - v[57] + tx[54] + tx[57] - ty[30] + ty[45],
        -v[29] - v[46] + v[53] - v[58] + 2 * tx[58],
        -v[2] - v[22] + v[25] + v[37] + v[42] - v[62] + tx[22] - tx[25] + 2 * tx[62]
        + 2 * ty[2] + ty[22] - ty[37],
        # 140
        -v[5] - v[10] + v[17] + v[34] - 2 * (tx[17] + tx[34] - ty[5] - ty[10]),
        v[1] + v[21] - v[26] + v[38] + v[41] - v[61] - 2 * tx[21] - tx[38] - tx[41]
        - 2 * ty[1] + ty[26] - ty[41],
        v[2] + v[22] + v[25] - v[37] + v[42] - v[62] - tx[22] - tx[25] - 2 * tx[42]
        - 2 * ty[2] - ty[22] + ty[37],
        v[29] + v[46] + v[53] + v[58] - 2 * (tx[29] + tx[46]),
        v[13] + v[49] - 2 * tx[49],
        -v[29] + v[46] + v[53] - v[58] - 2 * (tx[53] - ty[29]),
        -v[30] - v[45] + v[54] + v[57] - tx[54] - tx[57] + ty[30] + ty[45],
        -v[1] + v[21] + v[26] - v[38] + v[41] + v[61] + tx[38] - tx[41] - 2 * tx[61]
        - 2 * ty[21] - ty[26] - ty[41],
        v[29] - v[46] + v[53] + v[58] - 2 * ty[29],
        v[13] - v[49],
        # 150
        v[14] - v[50],
        -v[5] - v[10] - v[17] + v[34] + 2 * ty[17],
        v[30] + v[45] - v[54] + v[57] + tx[54] - tx[57] - ty[30] - ty[45],
        -v[14] + v[50],
        v[13] - v[49],
        v[6] - v[9] - v[18] - v[33] - tx[6] + tx[9] + ty[18] + ty[33],
        -v[1] - v[21] - v[26] + v[38] - v[41] + v[61] + 2 * tx[1] - tx[38] + tx[41]
        + 2 * ty[21] + ty[26] + ty[41],
        -v[5] + v[10] + v[17] - v[34] + 2 * (tx[5] - ty[17]),
        -v[6] - v[9] + v[18] + v[33] + tx[6] + tx[9] - ty[18] - ty[33],
        -v[13] - v[49] + 2 * tx[13],
        # 160
        v[14] + v[50] - 2 * tx[50],
        -v[30] - v[45] + v[54] + v[57] - tx[54] - tx[57] + ty[30] + ty[45],
        v[29] - v[46] - v[53] + v[58] - 2 * (tx[58] - ty[46]),
        -v[2] + v[22] - v[25] + v[37] + v[42] + v[62] - tx[22] + tx[25] - 2 * tx[62]
        - ty[22] - ty[37] - 2 * ty[42],
        v[30] + v[45] + v[54] - v[57] - tx[54] + tx[57] - ty[30] - ty[45],
        v[14] - v[50],
        -v[13] + v[49],
        -v[6] + v[9] - v[18] - v[33] + tx[6] - tx[9] + ty[18] + ty[33],
        -v[29] + v[46] + v[53] + v[58] - 2 * ty[46],
        v[13] - v[49],
        # 170
        v[14] - v[50],
        -v[5] - v[10] + v[17] - v[34] + 2 * ty[34],
        -v[2] - v[22] + v[25] - v[37] - v[42] + v[62] + 2 * tx[2] + tx[22] - tx[25]
        + ty[22] + ty[37] + 2 * ty[42],
        -v[6] - v[9] + v[18] + v[33] + tx[6] + tx[9] - ty[18] - ty[33],
        v[5] - v[10] - v[17] + v[34] + 2 * (tx[10] - ty[34]),
        -v[14] - v[50] + 2 * tx[14],
        -v[5] - v[10] - v[17] - v[34] + 2 * (tx[17] + tx[34]),
        v[1] - v[21] + v[26] - v[38] - v[41] - v[61] + 2 * tx[21] + tx[38] + tx[41]
        - ty[26] + ty[41] + 2 * ty[61],
        v[2] - v[22] - v[25] + v[37] - v[42] - v[62] + tx[22] + tx[25] + 2 * tx[42]
        + ty[22] - ty[37] + 2 * ty[62],
        -v[29] - v[46] + v[53] + v[58] + 2 * (tx[29] + tx[46] - ty[53] - ty[58]),
        # 180
        v[1] - v[21] - v[26] - v[38] + v[41] + v[61] - 2 * tx[1] + tx[38] - tx[41]
        + ty[26] - ty[41] - 2 * ty[61],
        v[5] - v[10] + v[17] + v[34] - 2 * tx[5],
        v[6] + v[9] + v[18] - v[33] - tx[6] - tx[9] - ty[18] + ty[33],
        v[13] - v[49] - 2 * (tx[13] - ty[49]),
        v[2] + v[22] - v[25] - v[37] - v[42] + v[62] - 2 * tx[2] - tx[22] + tx[25]
        - ty[22] + ty[37] - 2 * ty[62],
        v[6] + v[9] - v[18] + v[33] - tx[6] - tx[9] + ty[18] - ty[33],
        -v[5] + v[10] + v[17] + v[34] - 2 * tx[10],
        v[14] - v[50] - 2 * (tx[14] - ty[50]),
        -v[29] - v[46] - v[53] - v[58] + 2 * (ty[53] + ty[58]),
        v[13] + v[49] - 2 * ty[49],
        # 190
        v[14] + v[50] - 2 * ty[50],
        -v[5] - v[10] + v[17] + v[34],
    ]
    return np.array(kp, dtype=float)