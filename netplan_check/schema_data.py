"""Literal schema sources for Netplan network definitions.

Draft-7 cannot extend a referenced definition while keeping
``additionalProperties: false``: properties pulled in through ``$ref`` are
invisible to the closedness check of the referencing object. The interface
entries below therefore carry only their own keys, and
:func:`netplan_check.schema.build_schema` merges ``COMMON_PROPERTIES`` into
each of them before compiling.

WARNING: only a subset of the properties Netplan supports is described here.
"""

SCHEMA = r"""
$schema: "http://json-schema.org/draft-07/schema#"
title: Netplan Network Definition
description: "Representation of a Netplan network definition"
type: object
required:
  - network
additionalProperties: false
properties:
  network:
    type: object
    additionalProperties: false
    properties:
      # network.version
      version:
        type: integer
        maximum: 2
        minimum: 2

      # network.renderer
      renderer:
        $ref: "#/definitions/renderer"

      # network.ethernets
      ethernets:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.ethernets.<interface>
          ".*$":
            additionalProperties: false
            properties:
              link:
                type: string
              virtual-function-count:
                type: integer
                minimum: 0
              embedded-switch-mode:
                type: string
                enum: [switchdev, legacy]
              delay-virtual-functions-rebind:
                type: boolean
              infiniband-mode:
                type: string
                enum: [datagram, connected]

      # network.vlans
      vlans:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.vlans.<interface>
          ".*$":
            additionalProperties: false
            properties:
              id:
                type: integer
              link:
                type: string

      # network.bridges
      bridges:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.bridges.<interface>
          ".*$":
            additionalProperties: false
            properties:
              interfaces:
                type: array
                uniqueItems: true
                items:
                  type: string
              parameters:
                type: object
                additionalProperties: false
                properties:
                  ageing-time:
                    type: string
                  aging-time:
                    type: string
                  priority:
                    type: integer
                    minimum: 0
                    maximum: 65535
                  port-priority:
                    type: integer
                    minimum: 0
                    maximum: 63
                  forward-delay:
                    type: string
                  hello-time:
                    type: string
                  max-age:
                    type: string
                  path-cost:
                    type: integer
                  stp:
                    type: boolean

      # network.modems
      modems:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.modems.<interface>
          ".*$":
            additionalProperties: false
            properties: {}

      # network.bonds
      bonds:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.bonds.<interface>
          ".*$":
            additionalProperties: false
            properties: {}

      # network.tunnels
      tunnels:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.tunnels.<interface>
          ".*$":
            additionalProperties: false
            properties: {}

      # network.vrfs
      vrfs:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.vrfs.<interface>
          ".*$":
            additionalProperties: false
            properties: {}

      # network.wifis
      wifis:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.wifis.<interface>
          ".*$":
            type: object
            additionalProperties: false
            properties:
              access-points:
                type: object
                patternProperties:
                  # network.wifis.<interface>.access-points.<ssid>
                  ".*$":
                    type: object
                    additionalProperties: false
                    properties:
                      password:
                        type: string
                      mode:
                        type: string
                        enum: [infrastructure, ap, adhoc]
                      bssid:
                        type: string
                      band:
                        type: string
                        enum: [5GHz, 2.4GHz]
                      channel:
                        type: integer
                      hidden:
                        type: boolean
                      auth:
                        type: object
                        additionalProperties: false
                        properties:
                          key-management:
                            type: string
                            enum: [none, psk, eap]
                          password:
                            type: string
                          method:
                            type: string
                            enum: [tls, peap, ttls]
                          identity:
                            type: string
                          anonymous-identity:
                            type: string
                          ca-certificate:
                            type: string
                          client-certificate:
                            type: string
                          client-key:
                            type: string
                          client-key-password:
                            type: string
                          phase2-auth:
                            type: string

      # network.nm-devices
      nm-devices:
        type: object
        properties:
          renderer:
            $ref: "#/definitions/renderer"

        patternProperties:
          # network.nm-devices.<interface>
          ".*$":
            additionalProperties: false
            properties: {}

definitions:
  renderer:
    type: string
    enum: [networkd, NetworkManager, sriov]
"""

COMMON_PROPERTIES = r"""
renderer:
  $ref: "#/definitions/renderer"

# network.<category>.<interface>.dhcp4
dhcp4:
  type: boolean

dhcp6:
  type: boolean

ipv6-mtu:
  type: integer
  minimum: 0

ipv6-privacy:
  type: boolean

link-local:
  type: array
  uniqueItems: true
  items:
    type: string
    enum: [ipv4, ipv6]

ignore-carrier:
  type: boolean

critical:
  type: boolean

dhcp-identifier:
  type: string
  enum: [duid, mac]

dhcp4-overrides:
  type: object
  additionalProperties: false
  properties:
    use-dns:
      type: boolean
    use-ntp:
      type: boolean
    send-hostname:
      type: boolean
    use-hostname:
      type: boolean
    use-mtu:
      type: boolean
    hostname:
      type: string
    use-routes:
      type: boolean
    route-metric:
      type: integer
    use-domains:
      type: boolean

dhcp6-overrides:
  type: object
  additionalProperties: false
  properties:
    use-dns:
      type: boolean
    use-ntp:
      type: boolean
    send-hostname:
      type: boolean
    use-hostname:
      type: boolean
    use-mtu:
      type: boolean
    hostname:
      type: string
    use-routes:
      type: boolean
    route-metric:
      type: integer
    use-domains:
      type: boolean

accept-ra:
  type: boolean

addresses:
  type: array
  uniqueItems: true
  items:
    anyOf:
      - type: object
        patternProperties:
          # TODO: restrict to ipv4/ipv6 addresses with a prefix length
          ".*$":
            type: object
            additionalProperties: false
            properties:
              lifetime:
                type: string
                enum: [forever, 0]
              label:
                type: string
                maxLength: 15
      - type: string
        pattern: .*$

ipv6-address-generation:
  type: string
  enum: [eui64, stable-privacy]

# TODO: reject together with ipv6-address-generation
ipv6-address-token:
  type: string

gateway4:
  type: string
  format: ipv4

gateway6:
  type: string
  format: ipv6

nameservers:
  type: object
  additionalProperties: false
  properties:
    search:
      type: array
      items:
        type: string
    addresses:
      type: array
      items:
        type: string

macaddress:
  type: string
  pattern: ([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2})

mtu:
  type: integer
  minimum: 0

optional:
  type: boolean

optional-addresses:
  type: array
  items:
    type: string
    enum: [ipv4-ll, ipv6-ra, dhcp4, dhcp6, static]

activation-mode:
  type: string
  enum: [manual, off]

routes:
  type: array
  items:
    type: object
    additionalProperties: false
    properties:
      from:
        type: string
      to:
        type: string
      via:
        type: string
      on-link:
        type: boolean
      metric:
        type: integer
        minimum: 0
      type:
        type: string
        enum: [unicast, anycast, blackhole, broadcast, local, multicast, nat, prohibit, throw, unreachable, xresolve]
      scope:
        type: string
        enum: [global, link, host]
      table:
        type: integer
        minimum: 0
      mtu:
        type: integer
        minimum: 0
      congestion-window:
        type: integer
        minimum: 0
      advertised-receive-window:
        type: integer
        minimum: 0

routing-policy:
  type: object
  additionalProperties: false
  properties:
    from:
      type: string
    to:
      type: string
    table:
      type: integer
      minimum: 0
    priority:
      type: integer
    mark:
      type: integer
      minimum: 1
    type-of-service:
      type: integer

neigh-suppress:
  type: boolean

match:
  type: object
  additionalProperties: false
  properties:
    name:
      type: string
    driver:
      type: string
    macaddress:
      type: string
      pattern: ([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2}):([0-9a-f]{2})
"""
