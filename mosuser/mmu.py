"""Memory layout constants and address arithmetic of the system."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

BITS_PER_LONG = 32
BITS_PER_LONG_LONG = 64

NASID = 256
PAGE_SIZE = 4096
PTMAP = PAGE_SIZE
PDMAP = 4 * 1024 * 1024
PGSHIFT = 12
PDSHIFT = 22

PTE_HARDFLAG_SHIFT = 6
PTE_G = 0x0001 << PTE_HARDFLAG_SHIFT
PTE_V = 0x0002 << PTE_HARDFLAG_SHIFT
PTE_D = 0x0004 << PTE_HARDFLAG_SHIFT
PTE_C_CACHEABLE = 0x0018 << PTE_HARDFLAG_SHIFT
PTE_C_UNCACHEABLE = 0x0010 << PTE_HARDFLAG_SHIFT
PTE_COW = 0x0001
PTE_LIBRARY = 0x0002

KUSEG = 0x00000000
KSEG0 = 0x80000000
KSEG1 = 0xA0000000
KSEG2 = 0xC0000000

KERNBASE = 0x80020000
ULIM = 0x80000000
KSTACKTOP = ULIM + PDMAP

UVPT = ULIM - PDMAP
UPAGES = UVPT - PDMAP
UENVS = UPAGES - PDMAP

UTOP = UENVS
UXSTACKTOP = UTOP

USTACKTOP = UTOP - 2 * PTMAP
UTEXT = PDMAP
UCOW = UTEXT - PTMAP
UTEMP = UCOW - PTMAP


def pdx(va: int) -> int:
    """Page directory index of a virtual address."""
    return ((va & _MASK32) >> PDSHIFT) & 0x03FF


def ptx(va: int) -> int:
    """Page table index of a virtual address."""
    return ((va & _MASK32) >> PGSHIFT) & 0x03FF


def pte_addr(pte: int) -> int:
    """Physical address held in a page table entry."""
    return pte & _MASK32 & ~0xFFF


def pte_flags(pte: int) -> int:
    """Flag bits of a page table entry."""
    return pte & 0xFFF


def ppn(pa: int) -> int:
    """Physical page number of a physical address."""
    return (pa & _MASK32) >> PGSHIFT


def vpn(va: int) -> int:
    """Virtual page number of a virtual address."""
    return (va & _MASK32) >> PGSHIFT


def _check_power_of_two(n: int) -> None:
    if n <= 0 or n & (n - 1):
        raise ValueError(f"{n} is not a power of two")


def round_up(a: int, n: int) -> int:
    """Round ``a`` up to a multiple of ``n``, a power of two."""
    _check_power_of_two(n)
    return (a + n - 1) & ~(n - 1)


def round_down(a: int, n: int) -> int:
    """Round ``a`` down to a multiple of ``n``, a power of two."""
    _check_power_of_two(n)
    return a & ~(n - 1)


def _genmask(h: int, l: int, bits: int, mask: int) -> int:
    if not 0 <= l <= h < bits:
        raise ValueError(f"invalid bit range {h}..{l} for {bits} bits")
    return ((mask << l) & mask) & (mask >> (bits - 1 - h))


def genmask(h: int, l: int) -> int:
    """32-bit mask with bits ``l`` through ``h`` set."""
    return _genmask(h, l, BITS_PER_LONG, _MASK32)


def genmask_ull(h: int, l: int) -> int:
    """64-bit mask with bits ``l`` through ``h`` set."""
    return _genmask(h, l, BITS_PER_LONG_LONG, _MASK64)


def log2(n: int) -> int:
    """Floor of the base-2 logarithm of ``n``; 0 for 0 and 1."""
    if n < 0:
        raise ValueError("log2 of a negative number")
    return max(n.bit_length() - 1, 0)


def paddr(kva: int) -> int:
    """Physical address of a kernel virtual address."""
    if kva < ULIM:
        raise ValueError(f"paddr called with invalid kva {kva:08x}")
    return kva - ULIM


def kaddr(pa: int, npage: int) -> int:
    """Kernel virtual address of a physical address, given the page count."""
    if ppn(pa) >= npage:
        raise ValueError(f"kaddr called with invalid pa {pa:08x}")
    return pa + ULIM