"""
Chemical elements, isotopes and named fragments.

This module provides the periodic-table data the formula parser and the
analysis folds depend on: element symbols and standard atomic weights,
known isotopes with their relative masses, noble-gas classification, and the
short-hand complex groups (Me, Et, Ph, ...) accepted in general formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final, FrozenSet


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.

    Attributes:
        atomic_number: Atomic number (proton count).
        symbol: Element symbol (e.g., "C", "Cl").
        name: Full element name.
        standard_atomic_weight: Conventional atomic weight. For elements
            without stable isotopes this is the mass number of the
            longest-lived isotope.
    """

    atomic_number: int
    symbol: str
    name: str
    standard_atomic_weight: float

    # Class-level registry
    _by_symbol: ClassVar[dict[str, "Element"]] = {}
    _by_number: ClassVar[dict[int, "Element"]] = {}

    def __post_init__(self) -> None:
        Element._by_symbol[self.symbol] = self
        Element._by_number[self.atomic_number] = self

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by its exact (case-sensitive) symbol."""
        return cls._by_symbol.get(symbol)

    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return cls._by_number.get(num)

    @property
    def is_noble_gas(self) -> bool:
        """Whether the element belongs to group 18."""
        return self.symbol in NOBLE_GASES

    @property
    def isotopes(self) -> tuple["Isotope", ...]:
        """Known isotopes of this element, principal isotope first."""
        return Isotope._by_element.get(self.symbol, ())

    @property
    def principal_isotope(self) -> "Isotope":
        """Most abundant isotope, or the longest-lived one for radioactive elements."""
        return self.isotopes[0]


@dataclass(frozen=True, slots=True)
class Isotope:
    """Immutable isotope data.

    Attributes:
        element: The element this isotope belongs to.
        mass_number: Nucleon count.
        relative_mass: Relative isotopic mass in unified atomic mass units.
        measured: False when ``relative_mass`` is a liquid-drop estimate
            for a short-lived nuclide without a tabulated mass.
    """

    element: Element
    mass_number: int
    relative_mass: float
    measured: bool = True

    _by_key: ClassVar[dict[tuple[str, int], "Isotope"]] = {}
    _by_element: ClassVar[dict[str, tuple["Isotope", ...]]] = {}

    def __post_init__(self) -> None:
        Isotope._by_key[(self.element.symbol, self.mass_number)] = self
        known = Isotope._by_element.get(self.element.symbol, ())
        Isotope._by_element[self.element.symbol] = known + (self,)

    def __str__(self) -> str:
        return self.shorthand or f"{self.mass_number}{self.element.symbol}"

    @classmethod
    def from_mass_number(cls, element: Element, mass_number: int) -> "Isotope | None":
        """Look up the isotope of an element with the given mass number."""
        return cls._by_key.get((element.symbol, mass_number))

    @classmethod
    def from_shorthand(cls, letter: str) -> "Isotope | None":
        """Look up a single-letter isotope symbol ("D" or "T")."""
        key = _ISOTOPE_SHORTHANDS.get(letter)
        return cls._by_key.get(key) if key is not None else None

    @property
    def shorthand(self) -> str | None:
        """Single-letter symbol for deuterium and tritium, else None."""
        return _SHORTHAND_BY_KEY.get((self.element.symbol, self.mass_number))


class Complex(Enum):
    """Named fragments that expand to a fixed sub-formula.

    The value is the two-letter abbreviation used in formulas.
    """

    METHYL = "Me"
    ETHYL = "Et"
    BUTYL = "Bu"
    PHENYL = "Ph"
    BENZYL = "Bn"
    CYCLOHEXYL = "Cy"
    CYCLOPENTADIENYL = "Cp"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Complex | None":
        """Look up a complex group by its abbreviation."""
        try:
            return cls(symbol)
        except ValueError:
            return None

    @property
    def carbons(self) -> int:
        """Number of carbon atoms in the fragment."""
        return _COMPLEX_COMPOSITION[self][0]

    @property
    def hydrogens(self) -> int:
        """Number of hydrogen atoms in the fragment."""
        return _COMPLEX_COMPOSITION[self][1]

    @property
    def charge(self) -> int:
        """Formal charge carried by the fragment."""
        return _COMPLEX_COMPOSITION[self][2]


# (carbons, hydrogens, charge)
_COMPLEX_COMPOSITION: Final[dict[Complex, tuple[int, int, int]]] = {
    Complex.METHYL: (1, 3, 0),
    Complex.ETHYL: (2, 5, 0),
    Complex.BUTYL: (4, 9, 0),
    Complex.PHENYL: (6, 5, 0),
    Complex.BENZYL: (7, 7, 0),
    Complex.CYCLOHEXYL: (6, 11, 0),
    Complex.CYCLOPENTADIENYL: (5, 5, -1),
}

NOBLE_GASES: Final[FrozenSet[str]] = frozenset({
    "He", "Ne", "Ar", "Kr", "Xe", "Rn", "Og",
})

_ISOTOPE_SHORTHANDS: Final[dict[str, tuple[str, int]]] = {
    "D": ("H", 2),
    "T": ("H", 3),
}
_SHORTHAND_BY_KEY: Final[dict[tuple[str, int], str]] = {
    key: letter for letter, key in _ISOTOPE_SHORTHANDS.items()
}


_ELEMENTS_DATA: Final[list[tuple[int, str, str, float]]] = [
    # (atomic_number, symbol, name, standard_atomic_weight)
    (1, "H", "Hydrogen", 1.008),
    (2, "He", "Helium", 4.002602),
    (3, "Li", "Lithium", 6.94),
    (4, "Be", "Beryllium", 9.0121831),
    (5, "B", "Boron", 10.81),
    (6, "C", "Carbon", 12.011),
    (7, "N", "Nitrogen", 14.007),
    (8, "O", "Oxygen", 15.999),
    (9, "F", "Fluorine", 18.998403163),
    (10, "Ne", "Neon", 20.1797),
    (11, "Na", "Sodium", 22.98976928),
    (12, "Mg", "Magnesium", 24.305),
    (13, "Al", "Aluminum", 26.9815385),
    (14, "Si", "Silicon", 28.085),
    (15, "P", "Phosphorus", 30.973761998),
    (16, "S", "Sulfur", 32.06),
    (17, "Cl", "Chlorine", 35.45),
    (18, "Ar", "Argon", 39.948),
    (19, "K", "Potassium", 39.0983),
    (20, "Ca", "Calcium", 40.078),
    (21, "Sc", "Scandium", 44.955908),
    (22, "Ti", "Titanium", 47.867),
    (23, "V", "Vanadium", 50.9415),
    (24, "Cr", "Chromium", 51.9961),
    (25, "Mn", "Manganese", 54.938044),
    (26, "Fe", "Iron", 55.845),
    (27, "Co", "Cobalt", 58.933194),
    (28, "Ni", "Nickel", 58.6934),
    (29, "Cu", "Copper", 63.546),
    (30, "Zn", "Zinc", 65.38),
    (31, "Ga", "Gallium", 69.723),
    (32, "Ge", "Germanium", 72.630),
    (33, "As", "Arsenic", 74.921595),
    (34, "Se", "Selenium", 78.971),
    (35, "Br", "Bromine", 79.904),
    (36, "Kr", "Krypton", 83.798),
    (37, "Rb", "Rubidium", 85.4678),
    (38, "Sr", "Strontium", 87.62),
    (39, "Y", "Yttrium", 88.90584),
    (40, "Zr", "Zirconium", 91.224),
    (41, "Nb", "Niobium", 92.90637),
    (42, "Mo", "Molybdenum", 95.95),
    (43, "Tc", "Technetium", 98.0),
    (44, "Ru", "Ruthenium", 101.07),
    (45, "Rh", "Rhodium", 102.90550),
    (46, "Pd", "Palladium", 106.42),
    (47, "Ag", "Silver", 107.8682),
    (48, "Cd", "Cadmium", 112.414),
    (49, "In", "Indium", 114.818),
    (50, "Sn", "Tin", 118.710),
    (51, "Sb", "Antimony", 121.760),
    (52, "Te", "Tellurium", 127.60),
    (53, "I", "Iodine", 126.90447),
    (54, "Xe", "Xenon", 131.293),
    (55, "Cs", "Cesium", 132.90545196),
    (56, "Ba", "Barium", 137.327),
    (57, "La", "Lanthanum", 138.90547),
    (58, "Ce", "Cerium", 140.116),
    (59, "Pr", "Praseodymium", 140.90766),
    (60, "Nd", "Neodymium", 144.242),
    (61, "Pm", "Promethium", 145.0),
    (62, "Sm", "Samarium", 150.36),
    (63, "Eu", "Europium", 151.964),
    (64, "Gd", "Gadolinium", 157.25),
    (65, "Tb", "Terbium", 158.92535),
    (66, "Dy", "Dysprosium", 162.500),
    (67, "Ho", "Holmium", 164.93033),
    (68, "Er", "Erbium", 167.259),
    (69, "Tm", "Thulium", 168.93422),
    (70, "Yb", "Ytterbium", 173.045),
    (71, "Lu", "Lutetium", 174.9668),
    (72, "Hf", "Hafnium", 178.49),
    (73, "Ta", "Tantalum", 180.94788),
    (74, "W", "Tungsten", 183.84),
    (75, "Re", "Rhenium", 186.207),
    (76, "Os", "Osmium", 190.23),
    (77, "Ir", "Iridium", 192.217),
    (78, "Pt", "Platinum", 195.084),
    (79, "Au", "Gold", 196.966569),
    (80, "Hg", "Mercury", 200.592),
    (81, "Tl", "Thallium", 204.38),
    (82, "Pb", "Lead", 207.2),
    (83, "Bi", "Bismuth", 208.98040),
    (84, "Po", "Polonium", 209.0),
    (85, "At", "Astatine", 210.0),
    (86, "Rn", "Radon", 222.0),
    (87, "Fr", "Francium", 223.0),
    (88, "Ra", "Radium", 226.0),
    (89, "Ac", "Actinium", 227.0),
    (90, "Th", "Thorium", 232.0377),
    (91, "Pa", "Protactinium", 231.03588),
    (92, "U", "Uranium", 238.02891),
    (93, "Np", "Neptunium", 237.0),
    (94, "Pu", "Plutonium", 244.0),
    (95, "Am", "Americium", 243.0),
    (96, "Cm", "Curium", 247.0),
    (97, "Bk", "Berkelium", 247.0),
    (98, "Cf", "Californium", 251.0),
    (99, "Es", "Einsteinium", 252.0),
    (100, "Fm", "Fermium", 257.0),
    (101, "Md", "Mendelevium", 258.0),
    (102, "No", "Nobelium", 259.0),
    (103, "Lr", "Lawrencium", 262.0),
    (104, "Rf", "Rutherfordium", 267.0),
    (105, "Db", "Dubnium", 268.0),
    (106, "Sg", "Seaborgium", 269.0),
    (107, "Bh", "Bohrium", 270.0),
    (108, "Hs", "Hassium", 270.0),
    (109, "Mt", "Meitnerium", 278.0),
    (110, "Ds", "Darmstadtium", 281.0),
    (111, "Rg", "Roentgenium", 282.0),
    (112, "Cn", "Copernicium", 285.0),
    (113, "Nh", "Nihonium", 286.0),
    (114, "Fl", "Flerovium", 289.0),
    (115, "Mc", "Moscovium", 290.0),
    (116, "Lv", "Livermorium", 293.0),
    (117, "Ts", "Tennessine", 294.0),
    (118, "Og", "Oganesson", 294.0),
]

# Principal isotope first: most abundant for elements with stable isotopes,
# longest-lived otherwise. Masses in u.
_ISOTOPES_DATA: Final[dict[str, tuple[tuple[int, float], ...]]] = {
    "H": ((1, 1.00782503207), (2, 2.0141017778), (3, 3.0160492777)),
    "He": ((4, 4.00260325415), (3, 3.0160293191)),
    "Li": ((7, 7.01600455), (6, 6.015122795)),
    "Be": ((9, 9.0121822), (7, 7.01692983), (10, 10.0135338)),
    "B": ((11, 11.0093054), (10, 10.0129370)),
    "C": ((12, 12.0), (13, 13.0033548378), (14, 14.003241989), (11, 11.0114336),
          (10, 10.0168532), (15, 15.0105993), (16, 16.0147013), (9, 9.0310367)),
    "N": ((14, 14.0030740048), (15, 15.0001088982), (13, 13.00573861)),
    "O": ((16, 15.99491461956), (17, 16.99913170), (18, 17.9991610), (15, 15.0030656),
          (19, 19.0035780), (14, 14.00859625)),
    "F": ((19, 18.99840322), (18, 18.0009380)),
    "Ne": ((20, 19.9924401754), (21, 20.99384668), (22, 21.991385114)),
    "Na": ((23, 22.9897692809), (22, 21.9944364), (24, 23.99096278)),
    "Mg": ((24, 23.985041700), (25, 24.98583692), (26, 25.982592929)),
    "Al": ((27, 26.98153863), (26, 25.98689169)),
    "Si": ((28, 27.9769265325), (29, 28.976494700), (30, 29.97377017), (32, 31.97414808)),
    "P": ((31, 30.97376163), (32, 31.97390727), (33, 32.9717255)),
    "S": ((32, 31.97207100), (33, 32.97145876), (34, 33.96786690), (36, 35.96708076),
          (35, 34.96903216)),
    "Cl": ((35, 34.96885268), (37, 36.96590259), (36, 35.96830698)),
    "Ar": ((40, 39.9623831225), (36, 35.967545106), (38, 37.9627324), (39, 38.964313)),
    "K": ((39, 38.96370668), (40, 39.96399848), (41, 40.96182576)),
    "Ca": ((40, 39.96259098), (42, 41.95861801), (43, 42.9587666), (44, 43.9554818),
           (46, 45.9536926), (48, 47.952534), (45, 44.9561866)),
    "Sc": ((45, 44.9559119), (46, 45.9551719)),
    "Ti": ((48, 47.9479463), (46, 45.9526316), (47, 46.9517631), (49, 48.9478700),
           (50, 49.9447912)),
    "V": ((51, 50.9439595), (50, 49.9471585)),
    "Cr": ((52, 51.9405075), (50, 49.9460442), (53, 52.9406494), (54, 53.9388804),
           (51, 50.9447674)),
    "Mn": ((55, 54.9380451), (54, 53.9403589)),
    "Fe": ((56, 55.9349375), (54, 53.9396105), (57, 56.9353940), (58, 57.9332756),
           (55, 54.9382934), (59, 58.9348755)),
    "Co": ((59, 58.9331950), (57, 56.9362914), (60, 59.9338171)),
    "Ni": ((58, 57.9353429), (60, 59.9307864), (61, 60.9310560), (62, 61.9283451),
           (64, 63.9279660), (63, 62.9296694)),
    "Cu": ((63, 62.9295975), (65, 64.9277895), (64, 63.9297642), (67, 66.9277303)),
    "Zn": ((64, 63.9291422), (66, 65.9260334), (67, 66.9271273), (68, 67.9248442),
           (70, 69.9253193), (65, 64.9292410)),
    "Ga": ((69, 68.9255736), (71, 70.9247013), (67, 66.9282017), (68, 67.9279801)),
    "Ge": ((74, 73.9211778), (70, 69.9242474), (72, 71.9220758), (73, 72.9234589),
           (76, 75.9214026), (68, 67.928094)),
    "As": ((75, 74.9215965), (73, 72.9238284), (74, 73.9239287)),
    "Se": ((80, 79.9165213), (74, 73.9224764), (76, 75.9192136), (77, 76.9199140),
           (78, 77.9173091), (82, 81.9166994), (75, 74.9225234)),
    "Br": ((79, 78.9183371), (81, 80.9162906), (76, 75.924541), (82, 81.916804)),
    "Kr": ((84, 83.911507), (78, 77.9203648), (80, 79.9163790), (82, 81.9134836),
           (83, 82.914136), (86, 85.91061073), (81, 80.9165920), (85, 84.9125273)),
    "Rb": ((85, 84.911789738), (87, 86.909180527), (86, 85.91116742)),
    "Sr": ((88, 87.9056121), (84, 83.913425), (86, 85.9092602), (87, 86.9088771),
           (89, 88.9074507), (90, 89.907738)),
    "Y": ((89, 88.9058483), (90, 89.9071519)),
    "Zr": ((90, 89.9047044), (91, 90.9056458), (92, 91.9050408), (94, 93.9063152),
           (96, 95.9082734), (89, 88.9088895)),
    "Nb": ((93, 92.9063781), (94, 93.9072839), (95, 94.9068358)),
    "Mo": ((98, 97.9054082), (92, 91.906811), (94, 93.9050883), (95, 94.9058421),
           (96, 95.9046795), (97, 96.9060215), (100, 99.907477), (99, 98.9077119)),
    "Tc": ((98, 97.907216), (97, 96.906365), (99, 98.9062547)),
    "Ru": ((102, 101.9043493), (96, 95.907598), (98, 97.905287), (99, 98.9059393),
           (100, 99.9042195), (101, 100.9055821), (104, 103.905433), (106, 105.907329)),
    "Rh": ((103, 102.905504), (105, 104.905694)),
    "Pd": ((106, 105.903486), (102, 101.905609), (103, 102.906087), (104, 103.904036),
           (105, 104.905085), (108, 107.903892), (110, 109.905153)),
    "Ag": ((107, 106.905097), (109, 108.904752), (110, 109.906107), (111, 110.905291)),
    "Cd": ((114, 113.9033585), (106, 105.906459), (108, 107.904184), (109, 108.904982),
           (110, 109.9030021), (111, 110.9041781), (112, 111.9027578), (113, 112.9044017),
           (116, 115.904756)),
    "In": ((115, 114.903878), (111, 110.905103), (113, 112.904058)),
    "Sn": ((120, 119.9021947), (112, 111.904818), (114, 113.902779), (115, 114.903342),
           (116, 115.901741), (117, 116.902952), (118, 117.901603), (119, 118.903308),
           (122, 121.9034390), (124, 123.9052739)),
    "Sb": ((121, 120.9038157), (123, 122.9042140), (124, 123.9059357), (125, 124.9052538)),
    "Te": ((130, 129.9062244), (120, 119.90402), (122, 121.9030439), (123, 122.9042700),
           (124, 123.9028179), (125, 124.9044307), (126, 125.9033117), (128, 127.9044631)),
    "I": ((127, 126.904473), (123, 122.905589), (124, 123.9062099), (125, 124.9046302),
          (129, 128.904988), (131, 130.9061246)),
    "Xe": ((132, 131.9041535), (124, 123.905893), (126, 125.904274), (128, 127.9035313),
           (129, 128.9047794), (130, 129.9035080), (131, 130.9050824), (133, 132.9059107),
           (134, 133.9053945), (136, 135.907219)),
    "Cs": ((133, 132.905451933), (134, 133.906718475), (135, 134.9059770),
           (137, 136.9070895)),
    "Ba": ((138, 137.9052472), (130, 129.9063208), (132, 131.9050613), (133, 132.9060075),
           (134, 133.9045084), (135, 134.9056886), (136, 135.9045759), (137, 136.9058274)),
    "La": ((139, 138.9063533), (138, 137.907112)),
    "Ce": ((140, 139.9054387), (136, 135.907172), (138, 137.905991), (142, 141.909244)),
    "Pr": ((141, 140.9076528),),
    "Nd": ((142, 141.9077233), (143, 142.9098143), (144, 143.9100873), (145, 144.9125736),
           (146, 145.9131169), (148, 147.916893), (150, 149.920891)),
    "Pm": ((145, 144.912749), (147, 146.9151385)),
    "Sm": ((152, 151.9197324), (144, 143.911999), (147, 146.9148979), (148, 147.9148227),
           (149, 148.9171847), (150, 149.9172755), (154, 153.9222093)),
    "Eu": ((153, 152.9212303), (151, 150.9198502)),
    "Gd": ((158, 157.9241039), (152, 151.9197910), (154, 153.9208656), (155, 154.9226220),
           (156, 155.9221227), (157, 156.9239601), (160, 159.9270541)),
    "Tb": ((159, 158.9253468),),
    "Dy": ((164, 163.9291748), (156, 155.924283), (158, 157.924409), (160, 159.9251975),
           (161, 160.9269334), (162, 161.9267984), (163, 162.9287312)),
    "Ho": ((165, 164.9303221),),
    "Er": ((166, 165.9302931), (162, 161.928778), (164, 163.929200), (167, 166.9320482),
           (168, 167.9323702), (170, 169.9354643)),
    "Tm": ((169, 168.9342133),),
    "Yb": ((174, 173.9388621), (168, 167.933897), (170, 169.9347618), (171, 170.9363258),
           (172, 171.9363815), (173, 172.9382108), (176, 175.9425717)),
    "Lu": ((175, 174.9407718), (176, 175.9426863)),
    "Hf": ((180, 179.9465500), (174, 173.940046), (176, 175.9414086), (177, 176.9432207),
           (178, 177.9436988), (179, 178.9458161)),
    "Ta": ((181, 180.9479958), (180, 179.9474648)),
    "W": ((184, 183.9509312), (180, 179.946704), (182, 181.9482042), (183, 182.9502230),
          (186, 185.9543641)),
    "Re": ((187, 186.9557531), (185, 184.9529550)),
    "Os": ((192, 191.9614807), (184, 183.9524891), (186, 185.9538382), (187, 186.9557505),
           (188, 187.9558382), (189, 188.9581475), (190, 189.9584470)),
    "Ir": ((193, 192.9629264), (191, 190.9605940), (192, 191.9626050)),
    "Pt": ((195, 194.9647911), (190, 189.959932), (192, 191.9610380), (194, 193.9626803),
           (196, 195.9649515), (198, 197.967893)),
    "Au": ((197, 196.9665687), (198, 197.9682423)),
    "Hg": ((202, 201.970643), (196, 195.965833), (198, 197.9667690), (199, 198.9682799),
           (200, 199.9683260), (201, 200.9703023), (204, 203.9734939)),
    "Tl": ((205, 204.9744275), (201, 200.970819), (203, 202.9723442)),
    "Pb": ((208, 207.9766521), (204, 203.9730436), (206, 205.9744653), (207, 206.9758969),
           (210, 209.9841885)),
    "Bi": ((209, 208.9803987), (210, 209.9841204)),
    "Po": ((209, 208.9824304), (210, 209.9828737)),
    "At": ((210, 209.987148), (211, 210.9874963)),
    "Rn": ((222, 222.0175777), (211, 210.990601), (220, 220.0113940)),
    "Fr": ((223, 223.0197359),),
    "Ra": ((226, 226.0254098), (223, 223.0185022), (224, 224.0202118), (228, 228.0310703)),
    "Ac": ((227, 227.0277521),),
    "Th": ((232, 232.0380553), (229, 229.031762), (230, 230.0331338)),
    "Pa": ((231, 231.0358840), (233, 233.0402473)),
    "U": ((238, 238.0507882), (233, 233.0396352), (234, 234.0409521), (235, 235.0439299),
          (236, 236.0455680)),
    "Np": ((237, 237.0481734), (239, 239.0529390)),
    "Pu": ((244, 244.064204), (238, 238.0495599), (239, 239.0521634), (240, 240.0538135),
           (241, 241.0568515), (242, 242.0587426)),
    "Am": ((243, 243.0613811), (241, 241.0568291)),
    "Cm": ((247, 247.070354), (244, 244.0627526), (248, 248.072349)),
    "Bk": ((247, 247.070307), (249, 249.0749867)),
    "Cf": ((251, 251.079587), (249, 249.0748535), (252, 252.081626)),
    "Es": ((252, 252.082980), (254, 254.088022)),
    "Fm": ((257, 257.095105),),
    "Md": ((258, 258.098431), (260, 260.10365)),
    "No": ((259, 259.10103),),
    "Lr": ((262, 262.10963), (266, 266.11983)),
    "Rf": ((267, 267.12179),),
    "Db": ((268, 268.12567),),
    "Sg": ((269, 269.12863),),
    "Bh": ((270, 270.13336),),
    "Hs": ((270, 270.13429),),
    "Mt": ((278, 278.15631),),
    "Ds": ((281, 281.16451),),
    "Rg": ((282, 282.16912),),
    "Cn": ((285, 285.17712),),
    "Nh": ((286, 286.18221),),
    "Fl": ((289, 289.19042),),
    "Mc": ((290, 290.19598),),
    "Lv": ((293, 293.20449),),
    "Ts": ((294, 294.21046),),
    "Og": ((294, 294.21392),),
}

# Lightest and heaviest observed nuclide of each element.
_MASS_NUMBER_RANGES: Final[dict[str, tuple[int, int]]] = {
    "H": (1, 7), "He": (3, 10), "Li": (3, 12), "Be": (5, 16), "B": (6, 21),
    "C": (8, 22), "N": (10, 25), "O": (12, 28), "F": (14, 31), "Ne": (16, 34),
    "Na": (18, 37), "Mg": (19, 40), "Al": (21, 43), "Si": (22, 44),
    "P": (24, 46), "S": (26, 49), "Cl": (28, 51), "Ar": (30, 53),
    "K": (32, 55), "Ca": (34, 57), "Sc": (36, 60), "Ti": (38, 63),
    "V": (40, 65), "Cr": (42, 67), "Mn": (44, 69), "Fe": (45, 72),
    "Co": (47, 75), "Ni": (48, 78), "Cu": (52, 80), "Zn": (54, 83),
    "Ga": (56, 86), "Ge": (58, 89), "As": (60, 92), "Se": (64, 94),
    "Br": (67, 97), "Kr": (69, 100), "Rb": (71, 103), "Sr": (73, 107),
    "Y": (76, 109), "Zr": (78, 112), "Nb": (81, 115), "Mo": (83, 117),
    "Tc": (85, 120), "Ru": (87, 124), "Rh": (89, 126), "Pd": (91, 128),
    "Ag": (93, 130), "Cd": (95, 133), "In": (97, 135), "Sn": (99, 138),
    "Sb": (103, 140), "Te": (105, 143), "I": (107, 145), "Xe": (109, 148),
    "Cs": (112, 151), "Ba": (114, 153), "La": (117, 155), "Ce": (119, 157),
    "Pr": (121, 159), "Nd": (124, 161), "Pm": (126, 163), "Sm": (128, 165),
    "Eu": (130, 167), "Gd": (133, 169), "Tb": (135, 171), "Dy": (138, 173),
    "Ho": (140, 175), "Er": (143, 177), "Tm": (144, 179), "Yb": (148, 181),
    "Lu": (150, 184), "Hf": (153, 188), "Ta": (155, 190), "W": (158, 192),
    "Re": (160, 194), "Os": (162, 196), "Ir": (164, 199), "Pt": (166, 202),
    "Au": (169, 205), "Hg": (171, 210), "Tl": (176, 212), "Pb": (178, 215),
    "Bi": (184, 218), "Po": (186, 227), "At": (191, 229), "Rn": (193, 231),
    "Fr": (199, 233), "Ra": (201, 235), "Ac": (206, 237), "Th": (208, 238),
    "Pa": (212, 240), "U": (217, 242), "Np": (225, 244), "Pu": (228, 247),
    "Am": (231, 249), "Cm": (233, 252), "Bk": (235, 254), "Cf": (237, 256),
    "Es": (240, 257), "Fm": (242, 259), "Md": (245, 260), "No": (248, 262),
    "Lr": (251, 266), "Rf": (253, 268), "Db": (255, 270), "Sg": (258, 273),
    "Bh": (260, 275), "Hs": (263, 277), "Mt": (265, 279), "Ds": (267, 281),
    "Rg": (272, 283), "Cn": (276, 285), "Nh": (278, 287), "Fl": (285, 289),
    "Mc": (287, 291), "Lv": (289, 293), "Ts": (291, 294), "Og": (293, 295),
}

# Liquid-drop coefficients in MeV and the constants for converting a
# binding energy into an atomic mass in u.
_VOLUME: Final[float] = 15.75
_SURFACE: Final[float] = 17.8
_COULOMB: Final[float] = 0.711
_ASYMMETRY: Final[float] = 23.7
_PAIRING: Final[float] = 11.18
_HYDROGEN_ATOM_MASS: Final[float] = 1.00782503207
_NEUTRON_MASS: Final[float] = 1.00866491588
_MEV_PER_U: Final[float] = 931.49410242


def _liquid_drop_mass(atomic_number: int, mass_number: int) -> float:
    """Estimate an atomic mass with the semi-empirical mass formula."""
    z = atomic_number
    n = mass_number - z
    a = mass_number
    binding = (
        _VOLUME * a
        - _SURFACE * a ** (2 / 3)
        - _COULOMB * z * (z - 1) / a ** (1 / 3)
        - _ASYMMETRY * (n - z) ** 2 / a
    )
    if z % 2 == 0 and n % 2 == 0:
        binding += _PAIRING / a ** 0.5
    elif z % 2 == 1 and n % 2 == 1:
        binding -= _PAIRING / a ** 0.5
    return z * _HYDROGEN_ATOM_MASS + n * _NEUTRON_MASS - binding / _MEV_PER_U


def _isotope_entries() -> list[tuple[str, int, float, bool]]:
    """Tabulated isotopes first, then estimates filling each mass-number range."""
    entries = []
    for sym, tabulated in _ISOTOPES_DATA.items():
        entries.extend((sym, mass_number, mass, True) for mass_number, mass in tabulated)
        known = {mass_number for mass_number, _ in tabulated}
        low, high = _MASS_NUMBER_RANGES[sym]
        low, high = min(low, min(known)), max(high, max(known))
        z = Element._by_symbol[sym].atomic_number
        entries.extend(
            (sym, mass_number, _liquid_drop_mass(z, mass_number), False)
            for mass_number in range(low, high + 1)
            if mass_number not in known
        )
    return entries


# Initialize elements
ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, name, weight)
    for num, sym, name, weight in _ELEMENTS_DATA
)

# Initialize isotopes
ISOTOPES: Final[tuple[Isotope, ...]] = tuple(
    Isotope(Element._by_symbol[sym], mass_number, mass, measured)
    for sym, mass_number, mass, measured in _isotope_entries()
)

HYDROGEN: Final[Element] = Element._by_symbol["H"]
CARBON: Final[Element] = Element._by_symbol["C"]
DEUTERIUM: Final[Isotope] = Isotope._by_key[("H", 2)]
TRITIUM: Final[Isotope] = Isotope._by_key[("H", 3)]

# Mass of the electron in u, used for charged isotopologue masses
ELECTRON_MASS: Final[float] = 0.000548579909065


def get_element(symbol: str) -> Element | None:
    """Resolve a one- or two-letter symbol to an element.

    Args:
        symbol: Element symbol (case-sensitive, e.g. "Co" not "CO").

    Returns:
        The element, or None if no element has this symbol.
    """
    return Element.from_symbol(symbol)


def get_isotope(element: Element, mass_number: int) -> Isotope | None:
    """Resolve an (element, mass number) pair to a known isotope.

    Args:
        element: The element.
        mass_number: Nucleon count.

    Returns:
        The isotope, or None when the pair is not a known isotope.
    """
    return Isotope.from_mass_number(element, mass_number)


def get_atomic_number(symbol: str) -> int:
    """Get atomic number for an element symbol, or 0 if not found."""
    elem = Element.from_symbol(symbol)
    return elem.atomic_number if elem else 0


def is_noble_gas(symbol: str) -> bool:
    """Check if symbol names a group 18 element."""
    return symbol in NOBLE_GASES
