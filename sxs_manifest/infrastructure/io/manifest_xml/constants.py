"""Names used in SxS assembly manifests.

Elements of the manifest proper live in the assembly v1 namespace; the
compatibility section declares its own default namespace on its root element.
Attributes are unqualified.
"""

from sxs_manifest.constants import Namespaces

from ..xml_writer import QName

ASM_V1_NS = Namespaces.ASSEMBLY_V1
COMPAT_V1_NS = Namespaces.COMPATIBILITY_V1

# assembly v1
ASSEMBLY = QName("assembly", ASM_V1_NS)
ASSEMBLY_IDENTITY = QName("assemblyIdentity", ASM_V1_NS)
DEPENDENCY = QName("dependency", ASM_V1_NS)
DEPENDENT_ASSEMBLY = QName("dependentAssembly", ASM_V1_NS)

# compatibility v1
COMPATIBILITY = QName("compatibility", COMPAT_V1_NS)
APPLICATION = QName("application", COMPAT_V1_NS)
MAX_VERSION_TESTED = QName("maxversiontested", COMPAT_V1_NS)
SUPPORTED_OS = QName("supportedOS", COMPAT_V1_NS)

ATTR_MANIFEST_VERSION = "manifestVersion"
ATTR_TYPE = "type"
ATTR_NAME = "name"
ATTR_LANGUAGE = "language"
ATTR_PROCESSOR_ARCHITECTURE = "processorArchitecture"
ATTR_VERSION = "version"
ATTR_PUBLIC_KEY_TOKEN = "publicKeyToken"
ATTR_ID = "Id"
