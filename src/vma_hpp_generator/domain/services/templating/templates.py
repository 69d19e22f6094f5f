#!/usr/bin/env python3

"""Literal C++ templates for each generated declaration kind."""

ENUM = """
enum class $0$1 {
  {{{e${name} = ${originalName}${,$}}}}
};

VULKAN_HPP_INLINE std::string to_string($0 value) {
  {{{if (value == $0::e${name}) return "${name}";}}}
  return "invalid ( " + VULKAN_HPP_NAMESPACE::toHexString(static_cast<uint32_t>(value)) + " )";
}
"""

FLAGS = """
using $1 = VULKAN_HPP_NAMESPACE::Flags<$0>;

VULKAN_HPP_INLINE VULKAN_HPP_CONSTEXPR $1 operator|($0 bit0, $0 bit1) VULKAN_HPP_NOEXCEPT {
  return $1(bit0) | bit1;
}

VULKAN_HPP_INLINE VULKAN_HPP_CONSTEXPR $1 operator&($0 bit0, $0 bit1) VULKAN_HPP_NOEXCEPT {
  return $1(bit0) & bit1;
}

VULKAN_HPP_INLINE VULKAN_HPP_CONSTEXPR $1 operator^($0 bit0, $0 bit1) VULKAN_HPP_NOEXCEPT {
  return $1(bit0) ^ bit1;
}

VULKAN_HPP_INLINE VULKAN_HPP_CONSTEXPR $1 operator~($0 bits) VULKAN_HPP_NOEXCEPT {
  return ~($1(bits));
}

VULKAN_HPP_INLINE std::string to_string($1 value) {
  if (!value) return "{}";
  std::string result;
  {{{if (value & $0::e${name}) result += "${name} | ";}}}
  return "{ " + result.substr( 0, result.size() - 3 ) + " }";
}
"""

FLAG_TRAITS = """
template<> struct FlagTraits<VMA_HPP_NAMESPACE::$0> {
  enum : VkFlags {
    allFlags =
      {{{${ ^|} VkFlags(VMA_HPP_NAMESPACE::$0::e${name})}}}
  };
};
"""

ENUMS_FILE = """#ifndef VULKAN_MEMORY_ALLOCATOR_ENUMS_HPP
#define VULKAN_MEMORY_ALLOCATOR_ENUMS_HPP

namespace VMA_HPP_NAMESPACE {
  $0
}

namespace VULKAN_HPP_NAMESPACE {
  $1
}
#endif
"""

STRUCT = """
struct $0 {
  using NativeType = Vma$0;

#if !defined( VULKAN_HPP_NO_STRUCT_CONSTRUCTORS )
  VULKAN_HPP_CONSTEXPR $0(
      {{{${ ^,} ${type} ${name}_ = {}}}}
    ) VULKAN_HPP_NOEXCEPT
    {{{${:^,} ${name}(${name}_)}}}
    {}
#endif

  $0& operator=($0 const &) VULKAN_HPP_NOEXCEPT = default;
  $0& operator=(Vma$0 const & rhs) VULKAN_HPP_NOEXCEPT {
    *this = *reinterpret_cast<VMA_HPP_NAMESPACE::$0 const *>(&rhs);
    return *this;
  }

  explicit operator Vma$0 const &() const VULKAN_HPP_NOEXCEPT {
    return *reinterpret_cast<const Vma$0 *>(this);
  }

  explicit operator Vma$0&() VULKAN_HPP_NOEXCEPT {
    return *reinterpret_cast<Vma$0 *>(this);
  }

#if defined( VULKAN_HPP_HAS_SPACESHIP_OPERATOR )
  auto operator<=>($0 const &) const = default;
#else
  bool operator==($0 const &) const = default;
#endif

#if !defined( VULKAN_HPP_NO_STRUCT_SETTERS )
{{{
  VULKAN_HPP_CONSTEXPR_14 $0& set${capitalName}(${type} ${name}_) VULKAN_HPP_NOEXCEPT {
    ${name} = ${name}_;
    return *this;
  }}}}
#endif

public:
  {{{${type} ${name} = {};}}}
};
VULKAN_HPP_STATIC_ASSERT(sizeof($0) == sizeof(Vma$0),
                         "struct and wrapper have different size!");
VULKAN_HPP_STATIC_ASSERT(std::is_standard_layout<$0>::value,
                         "struct wrapper is not a standard layout!");
VULKAN_HPP_STATIC_ASSERT(std::is_nothrow_move_constructible<$0>::value,
                         "$0 is not nothrow_move_constructible!");
"""

STRUCTS_FILE = """#ifndef VULKAN_MEMORY_ALLOCATOR_STRUCTS_HPP
#define VULKAN_MEMORY_ALLOCATOR_STRUCTS_HPP

namespace VMA_HPP_NAMESPACE {
  $0
}
#endif
"""

HANDLE_CLASS = """class $0 {
public:
  using CType      = Vma$0;
  using NativeType = Vma$0;
public:
  VULKAN_HPP_CONSTEXPR         $0() = default;
  VULKAN_HPP_CONSTEXPR         $0(std::nullptr_t) VULKAN_HPP_NOEXCEPT {}
  VULKAN_HPP_TYPESAFE_EXPLICIT $0(Vma$0 $1) VULKAN_HPP_NOEXCEPT : m_$1($1) {}

#if defined(VULKAN_HPP_TYPESAFE_CONVERSION)
  $0& operator=(Vma$0 $1) VULKAN_HPP_NOEXCEPT {
    m_$1 = $1;
    return *this;
  }
#endif

  $0& operator=(std::nullptr_t) VULKAN_HPP_NOEXCEPT {
    m_$1 = {};
    return *this;
  }

#if defined( VULKAN_HPP_HAS_SPACESHIP_OPERATOR )
  auto operator<=>($0 const &) const = default;
#else
  bool operator==($0 const & rhs) const VULKAN_HPP_NOEXCEPT {
    return m_$1 == rhs.m_$1;
  }
#endif

  VULKAN_HPP_TYPESAFE_EXPLICIT operator Vma$0() const VULKAN_HPP_NOEXCEPT {
    return m_$1;
  }

  explicit operator bool() const VULKAN_HPP_NOEXCEPT {
    return m_$1 != VK_NULL_HANDLE;
  }

  bool operator!() const VULKAN_HPP_NOEXCEPT {
    return m_$1 == VK_NULL_HANDLE;
  }
$2
private:
  Vma$0 m_$1;
};
VULKAN_HPP_STATIC_ASSERT(sizeof($0) == sizeof(Vma$0),
                         "handle and wrapper have different size!");
"""

FUNCTION_SIGNATURE = "$0$1($2)$3"

FUNCTION_BODY = """$0 {
  $1
}
"""

HANDLES_FILE = """#ifndef VULKAN_MEMORY_ALLOCATOR_HANDLES_HPP
#define VULKAN_MEMORY_ALLOCATOR_HANDLES_HPP

namespace VMA_HPP_NAMESPACE {
  $0
}
#endif
"""

FUNCS_FILE = """#ifndef VULKAN_MEMORY_ALLOCATOR_FUNCS_HPP
#define VULKAN_MEMORY_ALLOCATOR_FUNCS_HPP

namespace VMA_HPP_NAMESPACE {
  $0
}
#endif
"""

UMBRELLA_FILE = """#ifndef VULKAN_MEMORY_ALLOCATOR_HPP
#define VULKAN_MEMORY_ALLOCATOR_HPP

#include "vk_mem_alloc.h"
#include <vulkan/vulkan.hpp>

#if !defined(VMA_HPP_NAMESPACE)
#define VMA_HPP_NAMESPACE vma
#endif

#define VMA_HPP_NAMESPACE_STRING VULKAN_HPP_STRINGIFY(VMA_HPP_NAMESPACE)

#include "vk_mem_alloc_enums.hpp"
#include "vk_mem_alloc_handles.hpp"
#include "vk_mem_alloc_structs.hpp"
#include "vk_mem_alloc_funcs.hpp"

#endif
"""
