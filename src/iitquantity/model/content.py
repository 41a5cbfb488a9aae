"""
Screen Content
==============
The literal strings shown on the IIT quantity screen.

The text explains the first problem of consciousness as framed by Information
Integration Theory (Tononi 2004; Tononi and Sporns 2003). Citations follow the
Chicago Manual of Style.
"""
from __future__ import annotations

from dataclasses import dataclass

from iitquantity.model.styles import Color


@dataclass(frozen=True)
class LabeledRowData:
    label: str
    value: str
    value_color: Color = Color.PRIMARY


@dataclass(frozen=True)
class ComparisonCardData:
    """One example system of the photodiode / camera / brain analogy."""
    key: str
    title: str
    icon: str
    accent: Color
    differentiation: str
    integration: str
    phi: str

    def rows(self) -> tuple[LabeledRowData, LabeledRowData, LabeledRowData]:
        return (
            LabeledRowData(DIFFERENTIATION_LABEL, self.differentiation),
            LabeledRowData(INTEGRATION_LABEL, self.integration),
            LabeledRowData(PHI_LABEL, self.phi, value_color=self.accent),
        )


@dataclass(frozen=True)
class Reference:
    citation: str
    doi_url: str

    @property
    def text(self) -> str:
        return f"{self.citation} {self.doi_url}"


DIFFERENTIATION_LABEL = "Differentiation:"
INTEGRATION_LABEL = "Integration:"
PHI_LABEL = "Φ (Phi) Value:"

HEADER_TITLE = "🧠 Problem 1: Quantity of Consciousness"

INTRO = (
    "The first major challenge in understanding consciousness is to determine what makes a "
    "system conscious and to what degree. _Information Integration Theory_ (IIT) proposes that "
    "the quantity of consciousness is a measure of a system's capacity to integrate information "
    "(Tononi 2004)."
)

ANALOGY_HEADING = "The Analogy: Differentiation vs. Integration"

ANALOGY_TEXT = (
    "IIT uses a powerful analogy to distinguish between systems with high information but low "
    "consciousness, and those with high consciousness. The key is not just having many possible "
    "states (**differentiation**), but that these states are bound together in a unified whole "
    "(**integration**)."
)

SYSTEMS: tuple[ComparisonCardData, ...] = (
    ComparisonCardData(
        key="photodiode",
        title="1. The Photodiode",
        icon="lightbulb.fill",
        accent=Color.GRAY,
        differentiation="Low (2 states: on/off)",
        integration="Trivial (a single element)",
        phi="Φ ≈ 0",
    ),
    ComparisonCardData(
        key="camera",
        title="2. The Digital Camera",
        icon="camera.fill",
        accent=Color.BLUE,
        differentiation="Extremely High (2¹'⁰⁰⁰'⁰⁰⁰ states)",
        integration="Extremely Low (pixels are independent)",
        phi="Φ ≈ 0",
    ),
    ComparisonCardData(
        key="brain",
        title="3. The Brain",
        icon="brain.head.profile",
        accent=Color.PURPLE,
        differentiation="Extremely High (vast neural states)",
        integration="Extremely High (unified experience)",
        phi="Φ > 0 (High)",
    ),
)

PHI_HEADING = "Measuring Integration: Φ (Phi)"

PHI_TEXT = (
    "To quantify integrated information, IIT introduces **Φ (Phi)**. It measures how much a "
    "system, as a whole, is causally constrained by its parts—more than the parts constrain each "
    "other independently. A high Φ value indicates a high level of consciousness."
)

MIB_TEXT = (
    "Calculating Φ involves finding the system's informational 'weakest link'—the **Minimum "
    "Information Bipartition (MIB)**. Φ is the amount of effective information (EI) that can be "
    "exchanged across this weakest link (Tononi and Sporns 2003)."
)

CODE_HEADING = "Conceptual Swift Logic for Φ"

CODE_DISCLAIMER = "This code outlines the *logic* of the Φ calculation, not a runnable implementation."

# Illustrative only. Shown verbatim and never executed.
PHI_CALCULATION_LOGIC = """\
/// Represents a system of interconnected elements.
struct NeuralSystem {
    let elements: Set<NeuralElement>
}

/// A conceptual algorithm to calculate integrated information (Φ).
struct PhiCalculator {

    /// Calculates the Φ value for a given system.
    /// - Returns: The amount of integrated information (consciousness).
    static func calculatePhi(for system: NeuralSystem) -> Double {

        // 1. Identify all possible ways to split the system in two (bipartitions).
        let allBipartitions = system.generateAllBipartitions()
        var minNormalizedEI: Double = .infinity
        var mibEI: Double = 0.0

        // 2. For each split, calculate the `Effective Information` (EI) across the cut.
        // EI measures how much one part constrains the state of the other.
        for partition in allBipartitions {
            // This is the computationally hardest step.
            let ei = calculateEffectiveInformation(across: partition)

            // Normalize to find the "weakest" informational link.
            let normalizedEI = normalize(ei, for: partition)

            if normalizedEI < minNormalizedEI {
                minNormalizedEI = normalizedEI
                mibEI = ei // This is the Φ for this partition.
            }
        }

        // 3. Φ is the EI of the "weakest link" (Minimum Information Bipartition).
        // A high value means the system cannot be reduced to its parts
        // without a great loss of causal information.
        return mibEI
    }

    // ... Helper functions (conceptual)
    private static func calculateEffectiveInformation(across partition: Bipartition) -> Double { /* ... */ return 0.0 }
    private static func normalize(_ ei: Double, for partition: Bipartition) -> Double { /* ... */ return 0.0 }
}"""

MAIN_COMPLEX_HEADING = "The Main Complex"

MAIN_COMPLEX_TEXT = (
    "For any given system, the substrate of consciousness is the **main complex**: the set of "
    "elements with the absolute maximum value of Φ. Elements outside this complex, like sensory "
    "nerves or motor outputs, do not directly contribute to the experience, even if they are "
    "causally connected to it (Tononi 2004)."
)

REFERENCES_HEADING = "References"

REFERENCES: tuple[Reference, ...] = (
    Reference(
        citation=(
            "Tononi, Giulio. 2004. “An Information Integration Theory of Consciousness.” "
            "*BMC Neuroscience* 5 (1): 42."
        ),
        doi_url="https://doi.org/10.1186/1471-2202-5-42",
    ),
    Reference(
        citation=(
            "Tononi, Giulio, and Olaf Sporns. 2003. “Measuring Information Integration.” "
            "*BMC Neuroscience* 4 (1): 31."
        ),
        doi_url="https://doi.org/10.1186/1471-2202-4-31",
    ),
)
