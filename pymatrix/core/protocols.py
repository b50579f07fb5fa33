"""
Core protocols for PyMatrix.

Structural interfaces that backends must satisfy. Protocol (structural
typing) rather than ABC, so a backend only has to look right.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pymatrix.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless; everything they need
    arrives with the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_householder', 'cpu_lapack'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            InvalidOperationError: If the design violates the algorithm's precondition
            NumericalError: If numerical issues prevent a solution
        """
        ...
