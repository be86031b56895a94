'''Known-good WRPLL settings for the TMDS (HDMI/DVI) pixel clocks.

Each entry is the clock in Hz along with the post divider, the doubled
feedback divider and the doubled reference divider.  The table is sorted by
clock, and lookup() relies on that.'''

from .search import RNP

from bisect import bisect_left
from dataclasses import dataclass

@dataclass(frozen=True)
class TMDSClock:
    clock: int                          # Hz
    p: int                              # Post divider
    n2: int                             # Feedback divider
    r2: int                             # Reference divider

    def rnp(self) -> RNP:
        return RNP(p=self.p, n2=self.n2, r2=self.r2)

WRPLL_TMDS_CLOCK_TABLE = [
    TMDSClock( 19750000, 38,  25,  18),
    TMDSClock( 20000000, 48,  32,  18),
    TMDSClock( 21000000, 36,  21,  15),
    TMDSClock( 21912000, 42,  29,  17),
    TMDSClock( 22000000, 36,  22,  15),
    TMDSClock( 23000000, 36,  23,  15),
    TMDSClock( 23500000, 40,  40,  23),
    TMDSClock( 23750000, 26,  16,  14),
    TMDSClock( 24000000, 36,  24,  15),
    TMDSClock( 25000000, 36,  25,  15),
    TMDSClock( 25175000, 26,  40,  33),
    TMDSClock( 25200000, 30,  21,  15),
    TMDSClock( 26000000, 36,  26,  15),
    TMDSClock( 27000000, 30,  21,  14),
    TMDSClock( 27027000, 18, 100, 111),
    TMDSClock( 27500000, 30,  29,  19),
    TMDSClock( 28000000, 34,  30,  17),
    TMDSClock( 28320000, 26,  30,  22),
    TMDSClock( 28322000, 32,  42,  25),
    TMDSClock( 28750000, 24,  23,  18),
    TMDSClock( 29000000, 30,  29,  18),
    TMDSClock( 29750000, 32,  30,  17),
    TMDSClock( 30000000, 30,  25,  15),
    TMDSClock( 30750000, 30,  41,  24),
    TMDSClock( 31000000, 30,  31,  18),
    TMDSClock( 31500000, 30,  28,  16),
    TMDSClock( 32000000, 30,  32,  18),
    TMDSClock( 32500000, 28,  32,  19),
    TMDSClock( 33000000, 24,  22,  15),
    TMDSClock( 34000000, 28,  30,  17),
    TMDSClock( 35000000, 26,  32,  19),
    TMDSClock( 35500000, 24,  30,  19),
    TMDSClock( 36000000, 26,  26,  15),
    TMDSClock( 36750000, 26,  46,  26),
    TMDSClock( 37000000, 24,  23,  14),
    TMDSClock( 37762500, 22,  40,  26),
    TMDSClock( 37800000, 20,  21,  15),
    TMDSClock( 38000000, 24,  27,  16),
    TMDSClock( 38250000, 24,  34,  20),
    TMDSClock( 39000000, 24,  26,  15),
    TMDSClock( 40000000, 24,  32,  18),
    TMDSClock( 40500000, 20,  21,  14),
    TMDSClock( 40541000, 22, 147,  89),
    TMDSClock( 40750000, 18,  19,  14),
    TMDSClock( 41000000, 16,  17,  14),
    TMDSClock( 41500000, 22,  44,  26),
    TMDSClock( 41540000, 22,  44,  26),
    TMDSClock( 42000000, 18,  21,  15),
    TMDSClock( 42500000, 22,  45,  26),
    TMDSClock( 43000000, 20,  43,  27),
    TMDSClock( 43163000, 20,  24,  15),
    TMDSClock( 44000000, 18,  22,  15),
    TMDSClock( 44900000, 20, 108,  65),
    TMDSClock( 45000000, 20,  25,  15),
    TMDSClock( 45250000, 20,  52,  31),
    TMDSClock( 46000000, 18,  23,  15),
    TMDSClock( 46750000, 20,  45,  26),
    TMDSClock( 47000000, 20,  40,  23),
    TMDSClock( 48000000, 18,  24,  15),
    TMDSClock( 49000000, 18,  49,  30),
    TMDSClock( 49500000, 16,  22,  15),
    TMDSClock( 50000000, 18,  25,  15),
    TMDSClock( 50500000, 18,  32,  19),
    TMDSClock( 51000000, 18,  34,  20),
    TMDSClock( 52000000, 18,  26,  15),
    TMDSClock( 52406000, 14,  34,  25),
    TMDSClock( 53000000, 16,  22,  14),
    TMDSClock( 54000000, 16,  24,  15),
    TMDSClock( 54054000, 16, 173, 108),
    TMDSClock( 54500000, 14,  24,  17),
    TMDSClock( 55000000, 12,  22,  18),
    TMDSClock( 56000000, 14,  45,  31),
    TMDSClock( 56250000, 16,  25,  15),
    TMDSClock( 56750000, 14,  25,  17),
    TMDSClock( 57000000, 16,  27,  16),
    TMDSClock( 58000000, 16,  43,  25),
    TMDSClock( 58250000, 16,  38,  22),
    TMDSClock( 58750000, 16,  40,  23),
    TMDSClock( 59000000, 14,  26,  17),
    TMDSClock( 59341000, 14,  40,  26),
    TMDSClock( 59400000, 16,  44,  25),
    TMDSClock( 60000000, 16,  32,  18),
    TMDSClock( 60500000, 12,  39,  29),
    TMDSClock( 61000000, 14,  49,  31),
    TMDSClock( 62000000, 14,  37,  23),
    TMDSClock( 62250000, 14,  42,  26),
    TMDSClock( 63000000, 12,  21,  15),
    TMDSClock( 63500000, 14,  28,  17),
    TMDSClock( 64000000, 12,  27,  19),
    TMDSClock( 65000000, 14,  32,  19),
    TMDSClock( 65250000, 12,  29,  20),
    TMDSClock( 65500000, 12,  32,  22),
    TMDSClock( 66000000, 12,  22,  15),
    TMDSClock( 66667000, 14,  38,  22),
    TMDSClock( 66750000, 10,  21,  17),
    TMDSClock( 67000000, 14,  33,  19),
    TMDSClock( 67750000, 14,  58,  33),
    TMDSClock( 68000000, 14,  30,  17),
    TMDSClock( 68179000, 14,  46,  26),
    TMDSClock( 68250000, 14,  46,  26),
    TMDSClock( 69000000, 12,  23,  15),
    TMDSClock( 70000000, 12,  28,  18),
    TMDSClock( 71000000, 12,  30,  19),
    TMDSClock( 72000000, 12,  24,  15),
    TMDSClock( 73000000, 10,  23,  17),
    TMDSClock( 74000000, 12,  23,  14),
    TMDSClock( 74176000,  8, 100,  91),
    TMDSClock( 74250000, 10,  22,  16),
    TMDSClock( 74481000, 12,  43,  26),
    TMDSClock( 74500000, 10,  29,  21),
    TMDSClock( 75000000, 12,  25,  15),
    TMDSClock( 75250000, 10,  39,  28),
    TMDSClock( 76000000, 12,  27,  16),
    TMDSClock( 77000000, 12,  53,  31),
    TMDSClock( 78000000, 12,  26,  15),
    TMDSClock( 78750000, 12,  28,  16),
    TMDSClock( 79000000, 10,  38,  26),
    TMDSClock( 79500000, 10,  28,  19),
    TMDSClock( 80000000, 12,  32,  18),
    TMDSClock( 81000000, 10,  21,  14),
    TMDSClock( 81081000,  6, 100, 111),
    TMDSClock( 81624000,  8,  29,  24),
    TMDSClock( 82000000,  8,  17,  14),
    TMDSClock( 83000000, 10,  40,  26),
    TMDSClock( 83950000, 10,  28,  18),
    TMDSClock( 84000000, 10,  28,  18),
    TMDSClock( 84750000,  6,  16,  17),
    TMDSClock( 85000000,  6,  17,  18),
    TMDSClock( 85250000, 10,  30,  19),
    TMDSClock( 85750000, 10,  27,  17),
    TMDSClock( 86000000, 10,  43,  27),
    TMDSClock( 87000000, 10,  29,  18),
    TMDSClock( 88000000, 10,  44,  27),
    TMDSClock( 88500000, 10,  41,  25),
    TMDSClock( 89000000, 10,  28,  17),
    TMDSClock( 89012000,  6,  90,  91),
    TMDSClock( 89100000, 10,  33,  20),
    TMDSClock( 90000000, 10,  25,  15),
    TMDSClock( 91000000, 10,  32,  19),
    TMDSClock( 92000000, 10,  46,  27),
    TMDSClock( 93000000, 10,  31,  18),
    TMDSClock( 94000000, 10,  40,  23),
    TMDSClock( 94500000, 10,  28,  16),
    TMDSClock( 95000000, 10,  44,  25),
    TMDSClock( 95654000, 10,  39,  22),
    TMDSClock( 95750000, 10,  39,  22),
    TMDSClock( 96000000, 10,  32,  18),
    TMDSClock( 97000000,  8,  23,  16),
    TMDSClock( 97750000,  8,  42,  29),
    TMDSClock( 98000000,  8,  45,  31),
    TMDSClock( 99000000,  8,  22,  15),
    TMDSClock( 99750000,  8,  34,  23),
    TMDSClock(100000000,  6,  20,  18),
    TMDSClock(100500000,  6,  19,  17),
    TMDSClock(101000000,  6,  37,  33),
    TMDSClock(101250000,  8,  21,  14),
    TMDSClock(102000000,  6,  17,  15),
    TMDSClock(102250000,  6,  25,  22),
    TMDSClock(103000000,  8,  29,  19),
    TMDSClock(104000000,  8,  37,  24),
    TMDSClock(105000000,  8,  28,  18),
    TMDSClock(106000000,  8,  22,  14),
    TMDSClock(107000000,  8,  46,  29),
    TMDSClock(107214000,  8,  27,  17),
    TMDSClock(108000000,  8,  24,  15),
    TMDSClock(108108000,  8, 173, 108),
    TMDSClock(109000000,  6,  23,  19),
    TMDSClock(110000000,  6,  22,  18),
    TMDSClock(110013000,  6,  22,  18),
    TMDSClock(110250000,  8,  49,  30),
    TMDSClock(110500000,  8,  36,  22),
    TMDSClock(111000000,  8,  23,  14),
    TMDSClock(111264000,  8, 150,  91),
    TMDSClock(111375000,  8,  33,  20),
    TMDSClock(112000000,  8,  63,  38),
    TMDSClock(112500000,  8,  25,  15),
    TMDSClock(113100000,  8,  57,  34),
    TMDSClock(113309000,  8,  42,  25),
    TMDSClock(114000000,  8,  27,  16),
    TMDSClock(115000000,  6,  23,  18),
    TMDSClock(116000000,  8,  43,  25),
    TMDSClock(117000000,  8,  26,  15),
    TMDSClock(117500000,  8,  40,  23),
    TMDSClock(118000000,  6,  38,  29),
    TMDSClock(119000000,  8,  30,  17),
    TMDSClock(119500000,  8,  46,  26),
    TMDSClock(119651000,  8,  39,  22),
    TMDSClock(120000000,  8,  32,  18),
    TMDSClock(121000000,  6,  39,  29),
    TMDSClock(121250000,  6,  31,  23),
    TMDSClock(121750000,  6,  23,  17),
    TMDSClock(122000000,  6,  42,  31),
    TMDSClock(122614000,  6,  30,  22),
    TMDSClock(123000000,  6,  41,  30),
    TMDSClock(123379000,  6,  37,  27),
    TMDSClock(124000000,  6,  51,  37),
    TMDSClock(125000000,  6,  25,  18),
    TMDSClock(125250000,  4,  13,  14),
    TMDSClock(125750000,  4,  27,  29),
    TMDSClock(126000000,  6,  21,  15),
    TMDSClock(127000000,  6,  24,  17),
    TMDSClock(127250000,  6,  41,  29),
    TMDSClock(128000000,  6,  27,  19),
    TMDSClock(129000000,  6,  43,  30),
    TMDSClock(129859000,  4,  25,  26),
    TMDSClock(130000000,  6,  26,  18),
    TMDSClock(130250000,  6,  42,  29),
    TMDSClock(131000000,  6,  32,  22),
    TMDSClock(131500000,  6,  38,  26),
    TMDSClock(131850000,  6,  41,  28),
    TMDSClock(132000000,  6,  22,  15),
    TMDSClock(132750000,  6,  28,  19),
    TMDSClock(133000000,  6,  34,  23),
    TMDSClock(133330000,  6,  37,  25),
    TMDSClock(134000000,  6,  61,  41),
    TMDSClock(135000000,  6,  21,  14),
    TMDSClock(135250000,  6, 167, 111),
    TMDSClock(136000000,  6,  62,  41),
    TMDSClock(137000000,  6,  35,  23),
    TMDSClock(138000000,  6,  23,  15),
    TMDSClock(138500000,  6,  40,  26),
    TMDSClock(138750000,  6,  37,  24),
    TMDSClock(139000000,  6,  34,  22),
    TMDSClock(139050000,  6,  34,  22),
    TMDSClock(139054000,  6,  34,  22),
    TMDSClock(140000000,  6,  28,  18),
    TMDSClock(141000000,  6,  36,  23),
    TMDSClock(141500000,  6,  22,  14),
    TMDSClock(142000000,  6,  30,  19),
    TMDSClock(143000000,  6,  27,  17),
    TMDSClock(143472000,  4,  17,  16),
    TMDSClock(144000000,  6,  24,  15),
    TMDSClock(145000000,  6,  29,  18),
    TMDSClock(146000000,  6,  47,  29),
    TMDSClock(146250000,  6,  26,  16),
    TMDSClock(147000000,  6,  49,  30),
    TMDSClock(147891000,  6,  23,  14),
    TMDSClock(148000000,  6,  23,  14),
    TMDSClock(148250000,  6,  28,  17),
    TMDSClock(148352000,  4, 100,  91),
    TMDSClock(148500000,  6,  33,  20),
    TMDSClock(149000000,  6,  48,  29),
    TMDSClock(150000000,  6,  25,  15),
    TMDSClock(151000000,  4,  19,  17),
    TMDSClock(152000000,  6,  27,  16),
    TMDSClock(152280000,  6,  44,  26),
    TMDSClock(153000000,  6,  34,  20),
    TMDSClock(154000000,  6,  53,  31),
    TMDSClock(155000000,  6,  31,  18),
    TMDSClock(155250000,  6,  50,  29),
    TMDSClock(155750000,  6,  45,  26),
    TMDSClock(156000000,  6,  26,  15),
    TMDSClock(157000000,  6,  61,  35),
    TMDSClock(157500000,  6,  28,  16),
    TMDSClock(158000000,  6,  65,  37),
    TMDSClock(158250000,  6,  44,  25),
    TMDSClock(159000000,  6,  53,  30),
    TMDSClock(159500000,  6,  39,  22),
    TMDSClock(160000000,  6,  32,  18),
    TMDSClock(161000000,  4,  31,  26),
    TMDSClock(162000000,  4,  18,  15),
    TMDSClock(162162000,  4, 131, 109),
    TMDSClock(162500000,  4,  53,  44),
    TMDSClock(163000000,  4,  29,  24),
    TMDSClock(164000000,  4,  17,  14),
    TMDSClock(165000000,  4,  22,  18),
    TMDSClock(166000000,  4,  32,  26),
    TMDSClock(167000000,  4,  26,  21),
    TMDSClock(168000000,  4,  46,  37),
    TMDSClock(169000000,  4, 104,  83),
    TMDSClock(169128000,  4,  64,  51),
    TMDSClock(169500000,  4,  39,  31),
    TMDSClock(170000000,  4,  34,  27),
    TMDSClock(171000000,  4,  19,  15),
    TMDSClock(172000000,  4,  51,  40),
    TMDSClock(172750000,  4,  32,  25),
    TMDSClock(172800000,  4,  32,  25),
    TMDSClock(173000000,  4,  41,  32),
    TMDSClock(174000000,  4,  49,  38),
    TMDSClock(174787000,  4,  22,  17),
    TMDSClock(175000000,  4,  35,  27),
    TMDSClock(176000000,  4,  30,  23),
    TMDSClock(177000000,  4,  38,  29),
    TMDSClock(178000000,  4,  29,  22),
    TMDSClock(178500000,  4,  37,  28),
    TMDSClock(179000000,  4,  53,  40),
    TMDSClock(179500000,  4,  73,  55),
    TMDSClock(180000000,  4,  20,  15),
    TMDSClock(181000000,  4,  55,  41),
    TMDSClock(182000000,  4,  31,  23),
    TMDSClock(183000000,  4,  42,  31),
    TMDSClock(184000000,  4,  30,  22),
    TMDSClock(184750000,  4,  26,  19),
    TMDSClock(185000000,  4,  37,  27),
    TMDSClock(186000000,  4,  51,  37),
    TMDSClock(187000000,  4,  36,  26),
    TMDSClock(188000000,  4,  32,  23),
    TMDSClock(189000000,  4,  21,  15),
    TMDSClock(190000000,  4,  38,  27),
    TMDSClock(190960000,  4,  41,  29),
    TMDSClock(191000000,  4,  41,  29),
    TMDSClock(192000000,  4,  27,  19),
    TMDSClock(192250000,  4,  37,  26),
    TMDSClock(193000000,  4,  20,  14),
    TMDSClock(193250000,  4,  53,  37),
    TMDSClock(194000000,  4,  23,  16),
    TMDSClock(194208000,  4,  23,  16),
    TMDSClock(195000000,  4,  26,  18),
    TMDSClock(196000000,  4,  45,  31),
    TMDSClock(197000000,  4,  35,  24),
    TMDSClock(197750000,  4,  41,  28),
    TMDSClock(198000000,  4,  22,  15),
    TMDSClock(198500000,  4,  25,  17),
    TMDSClock(199000000,  4,  28,  19),
    TMDSClock(200000000,  4,  37,  25),
    TMDSClock(201000000,  4,  61,  41),
    TMDSClock(202000000,  4, 112,  75),
    TMDSClock(202500000,  4,  21,  14),
    TMDSClock(203000000,  4, 146,  97),
    TMDSClock(204000000,  4,  62,  41),
    TMDSClock(204750000,  4,  44,  29),
    TMDSClock(205000000,  4,  38,  25),
    TMDSClock(206000000,  4,  29,  19),
    TMDSClock(207000000,  4,  23,  15),
    TMDSClock(207500000,  4,  40,  26),
    TMDSClock(208000000,  4,  37,  24),
    TMDSClock(208900000,  4,  48,  31),
    TMDSClock(209000000,  4,  48,  31),
    TMDSClock(209250000,  4,  31,  20),
    TMDSClock(210000000,  4,  28,  18),
    TMDSClock(211000000,  4,  25,  16),
    TMDSClock(212000000,  4,  22,  14),
    TMDSClock(213000000,  4,  30,  19),
    TMDSClock(213750000,  4,  38,  24),
    TMDSClock(214000000,  4,  46,  29),
    TMDSClock(214750000,  4,  35,  22),
    TMDSClock(215000000,  4,  43,  27),
    TMDSClock(216000000,  4,  24,  15),
    TMDSClock(217000000,  4,  37,  23),
    TMDSClock(218000000,  4,  42,  26),
    TMDSClock(218250000,  4,  42,  26),
    TMDSClock(218750000,  4,  34,  21),
    TMDSClock(219000000,  4,  47,  29),
    TMDSClock(220000000,  4,  44,  27),
    TMDSClock(220640000,  4,  49,  30),
    TMDSClock(220750000,  4,  36,  22),
    TMDSClock(221000000,  4,  36,  22),
    TMDSClock(222000000,  4,  23,  14),
    TMDSClock(222525000,  4, 150,  91),
    TMDSClock(222750000,  4,  33,  20),
    TMDSClock(227000000,  4,  37,  22),
    TMDSClock(230250000,  4,  29,  17),
    TMDSClock(233500000,  4,  38,  22),
    TMDSClock(235000000,  4,  40,  23),
    TMDSClock(238000000,  4,  30,  17),
    TMDSClock(241500000,  2,  17,  19),
    TMDSClock(245250000,  2,  20,  22),
    TMDSClock(247750000,  2,  22,  24),
    TMDSClock(253250000,  2,  15,  16),
    TMDSClock(256250000,  2,  18,  19),
    TMDSClock(262500000,  2,  31,  32),
    TMDSClock(267250000,  2,  66,  67),
    TMDSClock(268500000,  2,  94,  95),
    TMDSClock(270000000,  2,  14,  14),
    TMDSClock(272500000,  2,  77,  76),
    TMDSClock(273750000,  2,  57,  56),
    TMDSClock(280750000,  2,  24,  23),
    TMDSClock(281250000,  2,  23,  22),
    TMDSClock(286000000,  2,  17,  16),
    TMDSClock(291750000,  2,  26,  24),
    TMDSClock(296703000,  2, 100,  91),
    TMDSClock(297000000,  2,  22,  20),
    TMDSClock(298000000,  2,  21,  19),
]

CLOCKS = [e.clock for e in WRPLL_TMDS_CLOCK_TABLE]

def lookup(clock: int) -> TMDSClock | None:
    '''Find the table entry for clock (in Hz), or None.'''
    i = bisect_left(CLOCKS, clock)
    if i < len(CLOCKS) and CLOCKS[i] == clock:
        return WRPLL_TMDS_CLOCK_TABLE[i]
    return None

def test_sorted() -> None:
    assert len(WRPLL_TMDS_CLOCK_TABLE) == 373
    assert CLOCKS == sorted(set(CLOCKS))

def test_lookup() -> None:
    e = lookup(148500000)
    assert e is not None
    assert e.clock == 148500000
    assert e == WRPLL_TMDS_CLOCK_TABLE[CLOCKS.index(148500000)]
    first = WRPLL_TMDS_CLOCK_TABLE[0]
    assert lookup(first.clock) is first
    last = WRPLL_TMDS_CLOCK_TABLE[-1]
    assert lookup(last.clock) is last
    assert lookup(148500001) is None
    assert lookup(1) is None
    assert lookup(1 << 40) is None

def test_entries_valid() -> None:
    # Everything in the table is something the search could produce.
    from .search import in_range
    for e in WRPLL_TMDS_CLOCK_TABLE:
        assert in_range(e.rnp()), e
